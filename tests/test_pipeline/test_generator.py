"""Tests for RecruitmentGenerator."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from recruit_kit.config import AppConfig, BrandConfig, LLMConfig
from recruit_kit.models.analysis import ResumeAnalysis
from recruit_kit.models.hiring_kit import HiringKit, OnboardingPlan, Seniority
from recruit_kit.pipeline.generator import (
    HIRING_KIT_ERROR,
    ONBOARDING_ERROR,
    RESUME_ANALYSIS_ERROR,
    GenerationError,
    RecruitmentGenerator,
)


@pytest.fixture
def generator(mock_llm_client) -> RecruitmentGenerator:
    return RecruitmentGenerator(
        mock_llm_client,
        structured_model="claude-sonnet-4-5-20250929",
        chat_model="claude-haiku-4-5-20251001",
        max_tokens=16000,
        thinking_budget=8000,
    )


class TestFromConfig:
    def test_copies_llm_and_brand_settings(self, mock_llm_client):
        config = AppConfig(
            llm=LLMConfig(structured_model="m-structured", chat_model="m-chat", chat_max_tokens=512),
            brand=BrandConfig(name="Acme", description="a widget maker"),
        )
        gen = RecruitmentGenerator.from_config(mock_llm_client, config)
        assert gen.structured_model == "m-structured"
        assert gen.chat_model == "m-chat"
        assert gen.chat_max_tokens == 512
        assert gen.brand.name == "Acme"


class TestGenerateHiringKit:
    async def test_returns_validated_kit(
        self, generator, mock_llm_client, sample_kit_payload, sample_notes, sample_company_context
    ):
        mock_llm_client.generate_json.return_value = sample_kit_payload

        kit = await generator.generate_hiring_kit(sample_notes, sample_company_context, "Senior")

        assert isinstance(kit, HiringKit)
        assert [item.competency for item in kit.interview_scorecard] == [
            "Video Editing Mastery",
            "Creative Storytelling",
        ]
        assert kit.onboarding_plan is None

    async def test_request_carries_prompt_schema_and_model(
        self, generator, mock_llm_client, sample_kit_payload, sample_notes, sample_company_context
    ):
        mock_llm_client.generate_json.return_value = sample_kit_payload

        await generator.generate_hiring_kit(sample_notes, sample_company_context, Seniority.JUNIOR)

        kwargs = mock_llm_client.generate_json.call_args.kwargs
        assert "**Seniority Level:** Junior" in kwargs["prompt"]
        assert sample_notes in kwargs["prompt"]
        assert kwargs["schema"]["required"] == ["jobDescription", "interviewScorecard", "emailTemplates"]
        assert kwargs["model"] == "claude-sonnet-4-5-20250929"
        assert kwargs["thinking_budget"] == 8000

    async def test_missing_top_level_key_is_generation_error(
        self, generator, mock_llm_client, sample_kit_payload, sample_notes, sample_company_context
    ):
        del sample_kit_payload["emailTemplates"]
        mock_llm_client.generate_json.return_value = sample_kit_payload

        with pytest.raises(GenerationError) as exc_info:
            await generator.generate_hiring_kit(sample_notes, sample_company_context, "Mid-Level")

        assert str(exc_info.value) == HIRING_KIT_ERROR
        assert isinstance(exc_info.value.__cause__, ValueError)

    async def test_malformed_nested_shape_is_generation_error(
        self, generator, mock_llm_client, sample_kit_payload, sample_notes, sample_company_context
    ):
        sample_kit_payload["interviewScorecard"][0].pop("scoringRubric")
        mock_llm_client.generate_json.return_value = sample_kit_payload

        with pytest.raises(GenerationError, match="Failed to generate content"):
            await generator.generate_hiring_kit(sample_notes, sample_company_context, "Mid-Level")

    async def test_unparseable_reply_is_generation_error(
        self, generator, mock_llm_client, sample_notes, sample_company_context
    ):
        mock_llm_client.generate_json.side_effect = ValueError("Could not extract JSON object")

        with pytest.raises(GenerationError) as exc_info:
            await generator.generate_hiring_kit(sample_notes, sample_company_context, "Mid-Level")
        assert str(exc_info.value) == HIRING_KIT_ERROR

    async def test_transport_failure_is_single_attempt(
        self, generator, mock_llm_client, sample_notes, sample_company_context
    ):
        mock_llm_client.generate_json.side_effect = ConnectionError("network down")

        with pytest.raises(GenerationError):
            await generator.generate_hiring_kit(sample_notes, sample_company_context, "Mid-Level")
        assert mock_llm_client.generate_json.await_count == 1

    @pytest.mark.parametrize("notes,context", [("", "ctx"), ("notes", "   ")])
    async def test_empty_inputs_make_no_call(self, generator, mock_llm_client, notes, context):
        with pytest.raises(GenerationError):
            await generator.generate_hiring_kit(notes, context, "Mid-Level")
        mock_llm_client.generate_json.assert_not_awaited()


class TestGenerateOnboardingPlan:
    async def test_returns_plan(
        self, generator, mock_llm_client, sample_onboarding_payload, sample_company_context
    ):
        mock_llm_client.generate_json.return_value = sample_onboarding_payload

        plan = await generator.generate_onboarding_plan("# Video Editor", sample_company_context)

        assert isinstance(plan, OnboardingPlan)
        assert plan.day90 == "- Own a video end to end"
        prompt = mock_llm_client.generate_json.call_args.kwargs["prompt"]
        assert "# Video Editor" in prompt

    async def test_blank_section_is_generation_error(self, generator, mock_llm_client):
        mock_llm_client.generate_json.return_value = {"day30": "a", "day60": "", "day90": "c"}

        with pytest.raises(GenerationError) as exc_info:
            await generator.generate_onboarding_plan("# JD", "ctx")
        assert str(exc_info.value) == ONBOARDING_ERROR

    async def test_empty_job_description_makes_no_call(self, generator, mock_llm_client):
        with pytest.raises(GenerationError):
            await generator.generate_onboarding_plan("", "ctx")
        mock_llm_client.generate_json.assert_not_awaited()


class TestAnalyzeResume:
    async def test_returns_analysis_and_sends_competencies(
        self, generator, mock_llm_client, sample_analysis_payload, sample_kit, sample_resume_text
    ):
        mock_llm_client.generate_json.return_value = sample_analysis_payload

        analysis = await generator.analyze_resume(
            sample_resume_text, sample_kit.job_description, sample_kit.interview_scorecard
        )

        assert isinstance(analysis, ResumeAnalysis)
        assert analysis.competency_matches[0].match == "Strong Match"
        prompt = mock_llm_client.generate_json.call_args.kwargs["prompt"]
        assert "Video Editing Mastery, Creative Storytelling" in prompt
        assert sample_resume_text in prompt

    async def test_api_error_is_generation_error(
        self, generator, mock_llm_client, sample_kit, sample_resume_text
    ):
        mock_llm_client.generate_json.side_effect = RuntimeError("500")

        with pytest.raises(GenerationError) as exc_info:
            await generator.analyze_resume(
                sample_resume_text, sample_kit.job_description, sample_kit.interview_scorecard
            )
        assert str(exc_info.value) == RESUME_ANALYSIS_ERROR

    async def test_empty_resume_makes_no_call(self, generator, mock_llm_client, sample_kit):
        with pytest.raises(GenerationError):
            await generator.analyze_resume("  ", sample_kit.job_description, sample_kit.interview_scorecard)
        mock_llm_client.generate_json.assert_not_awaited()


class TestStartChat:
    def test_uses_chat_model_and_brand_instruction(self, mock_llm_client):
        session = MagicMock()
        mock_llm_client.start_chat = MagicMock(return_value=session)
        gen = RecruitmentGenerator(
            mock_llm_client,
            chat_model="claude-haiku-4-5-20251001",
            chat_max_tokens=1024,
            brand=BrandConfig(name="Acme", description="a widget maker"),
        )

        assert gen.start_chat() is session
        kwargs = mock_llm_client.start_chat.call_args.kwargs
        assert kwargs["model"] == "claude-haiku-4-5-20251001"
        assert kwargs["max_tokens"] == 1024
        assert "You are a helpful assistant for Acme, a widget maker." in kwargs["system"]


class TestErrorMessages:
    def test_messages_are_distinct(self):
        assert len({HIRING_KIT_ERROR, ONBOARDING_ERROR, RESUME_ANALYSIS_ERROR}) == 3

    async def test_cause_is_chained(self, generator, mock_llm_client):
        cause = AsyncMock(side_effect=KeyError("boom"))
        mock_llm_client.generate_json = cause
        with pytest.raises(GenerationError) as exc_info:
            await generator.generate_onboarding_plan("# JD", "ctx")
        assert isinstance(exc_info.value.__cause__, KeyError)
