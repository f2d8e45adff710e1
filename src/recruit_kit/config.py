"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LLMConfig:
    structured_model: str = "claude-sonnet-4-5-20250929"
    chat_model: str = "claude-haiku-4-5-20251001"
    max_tokens: int = 16000
    chat_max_tokens: int = 2048
    thinking_budget: int = 8000  # 0 disables extended thinking

    def __post_init__(self):
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be >= 1, got {self.max_tokens}")
        if self.chat_max_tokens < 1:
            raise ValueError(f"llm.chat_max_tokens must be >= 1, got {self.chat_max_tokens}")
        if self.thinking_budget < 0:
            raise ValueError(f"llm.thinking_budget must be >= 0, got {self.thinking_budget}")
        if self.thinking_budget and self.thinking_budget >= self.max_tokens:
            raise ValueError(
                f"llm.thinking_budget ({self.thinking_budget}) must be smaller than "
                f"llm.max_tokens ({self.max_tokens})"
            )


@dataclass(frozen=True)
class BrandConfig:
    name: str = "Trakin Tech"
    description: str = "a leading Indian tech YouTube channel"

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("brand.name must not be empty")


@dataclass(frozen=True)
class UIConfig:
    page_title: str = "Trakin Tech Recruitment AI"
    copy_ack_seconds: float = 2.0

    def __post_init__(self):
        if self.copy_ack_seconds <= 0:
            raise ValueError(f"ui.copy_ack_seconds must be > 0, got {self.copy_ack_seconds}")


@dataclass(frozen=True)
class AppSettings:
    log_level: str = "INFO"

    def __post_init__(self):
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"app.log_level must be one of {_LOG_LEVELS}, got {self.log_level!r}")

    @property
    def resolved_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    brand: BrandConfig = field(default_factory=BrandConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    app: AppSettings = field(default_factory=AppSettings)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        brand=BrandConfig(**raw.get("brand", {})),
        ui=UIConfig(**raw.get("ui", {})),
        app=AppSettings(**raw.get("app", {})),
    )
