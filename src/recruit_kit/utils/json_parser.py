"""Utility to extract JSON objects from LLM responses."""

from __future__ import annotations

import json
from collections.abc import Iterable


def extract_json(text: str) -> dict:
    """Extract a JSON object from an LLM response.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip ```json fence markers and parse
    3. First '{' to last '}' and parse

    Truncated output is not repaired: a cut-off object is a failed call,
    never a partial result.
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected response text, got {type(text).__name__}")
    text = text.strip()

    candidates = [text]
    stripped = _strip_code_fences(text)
    if stripped != text:
        candidates.append(stripped)

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            data = _extract_braces(candidate)
        if isinstance(data, dict):
            return data

    raise ValueError(f"Could not extract JSON object from text: {text[:200]}...")


def missing_keys(data: dict, required: Iterable[str]) -> list[str]:
    """Return required keys that are absent, null or empty strings in ``data``."""
    missing = []
    for key in required:
        value = data.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(key)
    return missing


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers around a payload."""
    lines = text.split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def _extract_braces(text: str) -> dict | None:
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        try:
            data = json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            return None
        return data if isinstance(data, dict) else None
    return None
