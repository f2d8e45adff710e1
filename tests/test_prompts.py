"""Tests for prompt builders and output schemas."""

import pytest

from recruit_kit.config import BrandConfig
from recruit_kit.models.hiring_kit import Seniority
from recruit_kit.prompts import (
    HIRING_KIT_SCHEMA,
    ONBOARDING_PLAN_SCHEMA,
    RESUME_ANALYSIS_SCHEMA,
    build_chat_system_instruction,
    build_hiring_kit_prompt,
    build_onboarding_prompt,
    build_resume_analysis_prompt,
    hiring_kit_schema,
)


class TestHiringKitPrompt:
    @pytest.mark.parametrize("seniority", list(Seniority))
    def test_embeds_inputs_verbatim(self, seniority, sample_notes, sample_company_context):
        prompt = build_hiring_kit_prompt(sample_notes, sample_company_context, seniority)
        assert f"**Seniority Level:** {seniority.value}" in prompt
        assert sample_notes in prompt
        assert sample_company_context in prompt

    def test_accepts_label_string(self):
        prompt = build_hiring_kit_prompt("notes", "context", "Senior")
        assert "**Seniority Level:** Senior" in prompt

    def test_unknown_seniority_rejected(self):
        with pytest.raises(ValueError):
            build_hiring_kit_prompt("notes", "context", "Principal")

    def test_inputs_between_delimiters(self):
        prompt = build_hiring_kit_prompt("RAW NOTES", "CONTEXT", Seniority.JUNIOR)
        assert "---\nRAW NOTES\n---" in prompt
        assert "---\nCONTEXT\n---" in prompt

    def test_is_deterministic(self):
        a = build_hiring_kit_prompt("n", "c", Seniority.SENIOR)
        b = build_hiring_kit_prompt("n", "c", Seniority.SENIOR)
        assert a == b

    def test_uses_brand(self):
        brand = BrandConfig(name="Acme Studios", description="a product studio")
        prompt = build_hiring_kit_prompt("n", "c", Seniority.SENIOR, brand=brand)
        assert "Acme Studios, a product studio" in prompt
        assert "Why You'll Love Acme Studios" in prompt


class TestSchemas:
    def test_hiring_kit_required_keys(self):
        assert HIRING_KIT_SCHEMA["required"] == [
            "jobDescription",
            "interviewScorecard",
            "emailTemplates",
        ]

    def test_hiring_kit_schema_fills_brand_without_mutating_base(self):
        schema = hiring_kit_schema(BrandConfig(name="Acme"))
        assert "Why You'll Love Acme" in schema["properties"]["jobDescription"]["description"]
        assert "{brand}" in HIRING_KIT_SCHEMA["properties"]["jobDescription"]["description"]

    def test_scorecard_item_shape(self):
        items = HIRING_KIT_SCHEMA["properties"]["interviewScorecard"]["items"]
        assert items["required"] == ["competency", "questions", "scoringRubric"]
        assert items["properties"]["scoringRubric"]["required"] == ["weak", "average", "strong"]

    def test_onboarding_required_keys(self):
        assert ONBOARDING_PLAN_SCHEMA["required"] == ["day30", "day60", "day90"]

    def test_resume_analysis_required_keys(self):
        assert RESUME_ANALYSIS_SCHEMA["required"] == [
            "summary",
            "competencyMatches",
            "suggestedQuestions",
        ]


class TestOtherPrompts:
    def test_onboarding_embeds_job_description(self):
        prompt = build_onboarding_prompt("# Editor JD", "Company ctx")
        assert "---\n# Editor JD\n---" in prompt
        assert "---\nCompany ctx\n---" in prompt

    def test_resume_analysis_lists_competencies(self):
        prompt = build_resume_analysis_prompt(
            "RESUME BODY", "JD BODY", ["Video Editing Mastery", "Creative Storytelling"]
        )
        assert "Video Editing Mastery, Creative Storytelling" in prompt
        assert "RESUME BODY" in prompt
        assert "JD BODY" in prompt

    def test_chat_system_instruction(self):
        text = build_chat_system_instruction(BrandConfig(name="Acme", description="a studio"))
        assert text.startswith("You are a helpful assistant for Acme, a studio.")
