"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from recruit_kit.clients.llm_client import LLMClient, LLMResponse
from recruit_kit.models.analysis import ResumeAnalysis
from recruit_kit.models.hiring_kit import HiringKit, OnboardingPlan
from recruit_kit.pipeline.generator import RecruitmentGenerator


@pytest.fixture
def sample_company_context() -> str:
    return (
        "We are Trakin Tech, a leading Indian YouTube channel focused on technology. "
        "Our culture is fast-paced, creative, and collaborative."
    )


@pytest.fixture
def sample_notes() -> str:
    return """Role: Video Editor for Trakin Tech

Responsibilities:
- Edit fast-paced YouTube videos with high audience retention.
- Work with Adobe Premiere Pro and After Effects.

Requirements:
- 4+ years of experience editing for YouTube.
"""


@pytest.fixture
def sample_resume_text() -> str:
    return """Priya Sharma
priya@example.com

Experience:
- Senior Editor, TechBytes (2020 - present)
  - Edited 300+ smartphone reviews, average retention up 18%
  - Built motion graphics templates in After Effects

Skills: Premiere Pro, After Effects, DaVinci Resolve
"""


@pytest.fixture
def sample_kit_payload() -> dict:
    return {
        "jobDescription": "# Video Editor\n\n## What You'll Do\n- Edit **fast-paced** reviews",
        "interviewScorecard": [
            {
                "competency": "Video Editing Mastery",
                "questions": [
                    "Walk me through your last edit.",
                    "How do you handle tight deadlines?",
                ],
                "scoringRubric": {
                    "weak": "Vague about tools",
                    "average": "Solid workflow",
                    "strong": "Clear retention-driven decisions",
                },
            },
            {
                "competency": "Creative Storytelling",
                "questions": ["Describe a story you shaped in the edit."],
                "scoringRubric": {
                    "weak": "No narrative thinking",
                    "average": "Some structure",
                    "strong": "Deliberate pacing and hooks",
                },
            },
        ],
        "emailTemplates": {
            "nextSteps": "Hi {name},\n\nGreat news! We'd like to move you forward.",
            "rejection": "Hi {name},\n\nThank you for your time.",
        },
    }


@pytest.fixture
def sample_onboarding_payload() -> dict:
    return {
        "day30": "- Review top-performing videos\n- Meet the team",
        "day60": "- Edit a segment\n- Collaborate on a full video",
        "day90": "- Own a video end to end",
    }


@pytest.fixture
def sample_analysis_payload() -> dict:
    return {
        "summary": "Strong editor with relevant YouTube experience.",
        "competencyMatches": [
            {
                "competency": "Video Editing Mastery",
                "match": "Strong Match",
                "evidence": "300+ smartphone reviews edited",
            },
            {
                "competency": "Creative Storytelling",
                "match": "Potential Gap",
                "evidence": "No explicit storytelling examples",
            },
        ],
        "suggestedQuestions": ["How did you lift retention by 18%?"],
    }


@pytest.fixture
def sample_kit(sample_kit_payload) -> HiringKit:
    return HiringKit.model_validate(sample_kit_payload)


@pytest.fixture
def sample_onboarding_plan(sample_onboarding_payload) -> OnboardingPlan:
    return OnboardingPlan.model_validate(sample_onboarding_payload)


@pytest.fixture
def sample_analysis(sample_analysis_payload) -> ResumeAnalysis:
    return ResumeAnalysis.model_validate(sample_analysis_payload)


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client


@pytest.fixture
def mock_generator() -> RecruitmentGenerator:
    """A generator whose three structured calls are AsyncMocks."""
    generator = AsyncMock(spec=RecruitmentGenerator)
    generator.generate_hiring_kit = AsyncMock()
    generator.generate_onboarding_plan = AsyncMock()
    generator.analyze_resume = AsyncMock()
    return generator


class FakeClock:
    """Manually advanced clock for time-dependent state."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
