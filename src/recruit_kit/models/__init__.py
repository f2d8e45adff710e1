"""Data models for the recruitment kit."""

from recruit_kit.models.analysis import CompetencyMatch, ResumeAnalysis
from recruit_kit.models.chat import ChatMessage
from recruit_kit.models.hiring_kit import (
    EmailTemplates,
    HiringKit,
    OnboardingPlan,
    ScorecardItem,
    ScoringRubric,
    Seniority,
)

__all__ = [
    "ChatMessage",
    "CompetencyMatch",
    "EmailTemplates",
    "HiringKit",
    "OnboardingPlan",
    "ResumeAnalysis",
    "ScorecardItem",
    "ScoringRubric",
    "Seniority",
]
