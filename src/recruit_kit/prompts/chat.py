"""System instruction for the free-form chat assistant."""

from __future__ import annotations

from recruit_kit.config import BrandConfig

CHAT_GREETING = "Hello! How can I assist you today?"


def build_chat_system_instruction(brand: BrandConfig = BrandConfig()) -> str:
    return (
        f"You are a helpful assistant for {brand.name}, {brand.description}. "
        "Your role is to assist with recruitment and content strategy queries."
    )
