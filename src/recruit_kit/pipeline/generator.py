"""Recruitment generator: hiring kit, onboarding plan, resume screening and chat."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from pydantic import BaseModel

from recruit_kit.clients.llm_client import ChatSession, LLMClient
from recruit_kit.config import AppConfig, BrandConfig
from recruit_kit.models.analysis import ResumeAnalysis
from recruit_kit.models.hiring_kit import HiringKit, OnboardingPlan, ScorecardItem, Seniority
from recruit_kit.prompts.chat import build_chat_system_instruction
from recruit_kit.prompts.hiring_kit import build_hiring_kit_prompt, hiring_kit_schema
from recruit_kit.prompts.onboarding import ONBOARDING_PLAN_SCHEMA, build_onboarding_prompt
from recruit_kit.prompts.resume_analysis import (
    RESUME_ANALYSIS_SCHEMA,
    build_resume_analysis_prompt,
)
from recruit_kit.utils.json_parser import missing_keys

logger = logging.getLogger(__name__)

HIRING_KIT_ERROR = (
    "Failed to generate content from the AI service. Please check your input and try again."
)
ONBOARDING_ERROR = "Failed to generate onboarding plan from the AI service."
RESUME_ANALYSIS_ERROR = (
    "Failed to analyze resume with the AI service. Please check your input and try again."
)

ModelT = TypeVar("ModelT", bound=BaseModel)


class GenerationError(Exception):
    """A generation call failed.

    The message is fixed per operation and safe to show to the user; the
    underlying cause is chained as ``__cause__``.
    """


class RecruitmentGenerator:
    """Builds prompts, calls the model and validates the structured replies.

    Never touches UI state: every method either returns a fresh result or
    raises GenerationError.
    """

    def __init__(
        self,
        llm: LLMClient,
        *,
        structured_model: str = "claude-sonnet-4-5-20250929",
        chat_model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 16000,
        chat_max_tokens: int = 2048,
        thinking_budget: int = 0,
        brand: BrandConfig | None = None,
    ):
        self.llm = llm
        self.structured_model = structured_model
        self.chat_model = chat_model
        self.max_tokens = max_tokens
        self.chat_max_tokens = chat_max_tokens
        self.thinking_budget = thinking_budget
        self.brand = brand or BrandConfig()

    @classmethod
    def from_config(cls, llm: LLMClient, config: AppConfig) -> RecruitmentGenerator:
        return cls(
            llm,
            structured_model=config.llm.structured_model,
            chat_model=config.llm.chat_model,
            max_tokens=config.llm.max_tokens,
            chat_max_tokens=config.llm.chat_max_tokens,
            thinking_budget=config.llm.thinking_budget,
            brand=config.brand,
        )

    async def _structured_call(
        self,
        *,
        prompt: str,
        schema: dict,
        model_cls: type[ModelT],
        error_message: str,
        label: str,
    ) -> ModelT:
        """Run one schema-constrained call; any failure becomes GenerationError."""
        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                schema=schema,
                model=self.structured_model,
                max_tokens=self.max_tokens,
                thinking_budget=self.thinking_budget,
            )
            absent = missing_keys(data, schema["required"])
            if absent:
                raise ValueError(f"Invalid response format for {label}: missing {', '.join(absent)}")
            return model_cls.model_validate(data)
        except Exception as e:
            logger.error("Error generating %s", label, exc_info=True)
            raise GenerationError(error_message) from e

    async def generate_hiring_kit(
        self,
        notes: str,
        company_context: str,
        seniority: Seniority | str,
    ) -> HiringKit:
        """Generate job description, interview scorecard and email templates."""
        if not notes.strip() or not company_context.strip():
            raise GenerationError(HIRING_KIT_ERROR)
        level = Seniority(seniority)
        logger.info("Generating hiring kit (seniority=%s)", level.value)
        return await self._structured_call(
            prompt=build_hiring_kit_prompt(notes, company_context, level, brand=self.brand),
            schema=hiring_kit_schema(self.brand),
            model_cls=HiringKit,
            error_message=HIRING_KIT_ERROR,
            label="hiring kit",
        )

    async def generate_onboarding_plan(
        self,
        job_description: str,
        company_context: str,
    ) -> OnboardingPlan:
        """Generate a 30-60-90 day plan from an already generated job description."""
        if not job_description.strip():
            raise GenerationError(ONBOARDING_ERROR)
        logger.info("Generating onboarding plan")
        return await self._structured_call(
            prompt=build_onboarding_prompt(job_description, company_context, brand=self.brand),
            schema=ONBOARDING_PLAN_SCHEMA,
            model_cls=OnboardingPlan,
            error_message=ONBOARDING_ERROR,
            label="onboarding plan",
        )

    async def analyze_resume(
        self,
        resume_text: str,
        job_description: str,
        scorecard: Sequence[ScorecardItem],
    ) -> ResumeAnalysis:
        """Compare a resume against the job description and scorecard competencies."""
        if not resume_text.strip() or not job_description.strip():
            raise GenerationError(RESUME_ANALYSIS_ERROR)
        competencies = [item.competency for item in scorecard]
        logger.info("Analyzing resume against %d competencies", len(competencies))
        return await self._structured_call(
            prompt=build_resume_analysis_prompt(
                resume_text, job_description, competencies, brand=self.brand
            ),
            schema=RESUME_ANALYSIS_SCHEMA,
            model_cls=ResumeAnalysis,
            error_message=RESUME_ANALYSIS_ERROR,
            label="resume analysis",
        )

    def start_chat(self) -> ChatSession:
        """Open a chat session with the assistant's fixed system instruction."""
        return self.llm.start_chat(
            system=build_chat_system_instruction(self.brand),
            model=self.chat_model,
            max_tokens=self.chat_max_tokens,
        )
