"""Plain-text renderings used as clipboard payloads."""

from __future__ import annotations

from collections.abc import Sequence

from recruit_kit.models.hiring_kit import OnboardingPlan, ScorecardItem


def scorecard_to_text(scorecard: Sequence[ScorecardItem]) -> str:
    blocks = []
    for item in scorecard:
        questions = "\n".join(f"- {q}" for q in item.questions)
        rubric = item.scoring_rubric
        blocks.append(
            f"Competency: {item.competency}\n\n"
            f"Questions:\n{questions}\n\n"
            "Scoring Rubric:\n"
            f"  - Weak: {rubric.weak}\n"
            f"  - Average: {rubric.average}\n"
            f"  - Strong: {rubric.strong}\n"
        )
    return "\n\n---\n\n".join(blocks)


def onboarding_to_text(plan: OnboardingPlan) -> str:
    return (
        f"First 30 Days:\n{plan.day30}\n\n"
        f"Days 31-60:\n{plan.day60}\n\n"
        f"Days 61-90:\n{plan.day90}"
    )
