"""Session usage caption for the Claude calls made so far."""

from __future__ import annotations

# Pricing per 1M tokens (USD)
MODEL_PRICING: dict[str, dict[str, float]] = {
    "claude-haiku-4-5-20251001": {"input": 1.00, "output": 5.00},
    "claude-sonnet-4-5-20250929": {"input": 3.00, "output": 15.00},
}


def summarize_usage(token_summary: dict) -> str:
    """One-line usage caption from an LLMClient token summary.

    The dollar figure covers only models listed in MODEL_PRICING.
    """
    calls = token_summary["calls"]
    cost = sum(
        (inp * MODEL_PRICING[model]["input"] + out * MODEL_PRICING[model]["output"]) / 1_000_000
        for model, inp, out in calls
        if model in MODEL_PRICING
    )
    return (
        f"{len(calls)} calls | "
        f"{token_summary['input']:,} in / {token_summary['output']:,} out tokens | "
        f"~${cost:.4f}"
    )
