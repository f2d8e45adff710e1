"""Prompt builders and output schemas for each generation call."""

from recruit_kit.prompts.chat import CHAT_GREETING, build_chat_system_instruction
from recruit_kit.prompts.hiring_kit import (
    HIRING_KIT_SCHEMA,
    build_hiring_kit_prompt,
    hiring_kit_schema,
)
from recruit_kit.prompts.onboarding import ONBOARDING_PLAN_SCHEMA, build_onboarding_prompt
from recruit_kit.prompts.resume_analysis import (
    RESUME_ANALYSIS_SCHEMA,
    build_resume_analysis_prompt,
)

__all__ = [
    "CHAT_GREETING",
    "HIRING_KIT_SCHEMA",
    "ONBOARDING_PLAN_SCHEMA",
    "RESUME_ANALYSIS_SCHEMA",
    "build_chat_system_instruction",
    "build_hiring_kit_prompt",
    "build_onboarding_prompt",
    "build_resume_analysis_prompt",
    "hiring_kit_schema",
]
