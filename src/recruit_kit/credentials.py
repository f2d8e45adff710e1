"""API key resolution performed once at app startup."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

PRIMARY_ENV_VAR = "ANTHROPIC_API_KEY"
SECONDARY_ENV_VAR = "API_KEY"
RUNTIME_SECRET_KEY = "ANTHROPIC_API_KEY"

MISSING_KEY_MESSAGE = (
    f"{PRIMARY_ENV_VAR} or {SECONDARY_ENV_VAR} environment variable not set "
    "(and no ANTHROPIC_API_KEY in the Streamlit secrets)"
)


@dataclass(frozen=True)
class CredentialResolution:
    """Outcome of looking up the API key.

    ``source`` names where the key came from ("env:ANTHROPIC_API_KEY",
    "env:API_KEY" or "secrets:ANTHROPIC_API_KEY") and is None when no
    source provided one.
    """

    api_key: str | None
    source: str | None

    @property
    def ok(self) -> bool:
        return self.api_key is not None

    @property
    def error(self) -> str | None:
        return None if self.ok else MISSING_KEY_MESSAGE


def resolve_api_key(
    environ: Mapping[str, str],
    runtime_secrets: Mapping[str, str] | None = None,
) -> CredentialResolution:
    """Return the first non-blank key from env vars, then runtime secrets."""
    candidates = [
        (f"env:{PRIMARY_ENV_VAR}", environ.get(PRIMARY_ENV_VAR)),
        (f"env:{SECONDARY_ENV_VAR}", environ.get(SECONDARY_ENV_VAR)),
    ]
    if runtime_secrets is not None:
        candidates.append((f"secrets:{RUNTIME_SECRET_KEY}", runtime_secrets.get(RUNTIME_SECRET_KEY)))

    for source, value in candidates:
        if value and str(value).strip():
            logger.debug("API key resolved from %s", source)
            return CredentialResolution(api_key=str(value).strip(), source=source)

    logger.error("No API key found in environment or runtime secrets")
    return CredentialResolution(api_key=None, source=None)
