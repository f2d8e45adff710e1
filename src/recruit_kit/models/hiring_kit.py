"""Pydantic models for the generated hiring kit."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Seniority(str, Enum):
    JUNIOR = "Junior"
    MID_LEVEL = "Mid-Level"
    SENIOR = "Senior"


class ScoringRubric(BaseModel):
    weak: str
    average: str
    strong: str


class ScorecardItem(BaseModel):
    competency: str
    questions: list[str]  # 2-3 expected
    scoring_rubric: ScoringRubric = Field(alias="scoringRubric")

    model_config = {"populate_by_name": True}


class EmailTemplates(BaseModel):
    next_steps: str = Field(alias="nextSteps")
    rejection: str

    model_config = {"populate_by_name": True}


class OnboardingPlan(BaseModel):
    day30: str
    day60: str
    day90: str


class HiringKit(BaseModel):
    job_description: str = Field(alias="jobDescription")
    interview_scorecard: list[ScorecardItem] = Field(alias="interviewScorecard")
    email_templates: EmailTemplates = Field(alias="emailTemplates")
    onboarding_plan: OnboardingPlan | None = Field(default=None, alias="onboardingPlan")

    model_config = {"populate_by_name": True}

    def with_onboarding_plan(self, plan: OnboardingPlan) -> HiringKit:
        """Return a copy of this kit with ``plan`` attached.

        A kit carries at most one plan; attaching a second one is an error.
        """
        if self.onboarding_plan is not None:
            raise ValueError("Hiring kit already has an onboarding plan")
        return self.model_copy(update={"onboarding_plan": plan})
