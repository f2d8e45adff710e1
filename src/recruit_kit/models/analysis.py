"""Pydantic models for resume screening output."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CompetencyMatch(BaseModel):
    competency: str
    match: str  # "Strong Match", "Good Match", "Potential Gap" (not enforced)
    evidence: str


class ResumeAnalysis(BaseModel):
    summary: str
    competency_matches: list[CompetencyMatch] = Field(alias="competencyMatches")
    suggested_questions: list[str] = Field(alias="suggestedQuestions")

    model_config = {"populate_by_name": True}
