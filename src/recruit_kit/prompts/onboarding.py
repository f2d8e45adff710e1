"""Prompt and output schema for the 30-60-90 day onboarding plan."""

from __future__ import annotations

from recruit_kit.config import BrandConfig

ONBOARDING_PLAN_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "day30": {
            "type": "string",
            "description": (
                "A detailed plan for the new hire's first 30 days, focused on learning and "
                "integration. Use markdown bullet points."
            ),
        },
        "day60": {
            "type": "string",
            "description": (
                "A detailed plan for the new hire's next 30 days (days 31-60), focused on "
                "contribution and taking on initial responsibilities. Use markdown bullet points."
            ),
        },
        "day90": {
            "type": "string",
            "description": (
                "A detailed plan for the new hire's following 30 days (days 61-90), focused on "
                "owning projects and demonstrating initiative. Use markdown bullet points."
            ),
        },
    },
    "required": ["day30", "day60", "day90"],
}


def build_onboarding_prompt(
    job_description: str,
    company_context: str,
    brand: BrandConfig = BrandConfig(),
) -> str:
    """Build the onboarding plan instruction seeded with a generated job description."""
    return f"""You are an expert HR and Talent Development strategist at {brand.name}, {brand.description}.
Company Context:
---
{company_context}
---

Based on the company context and the detailed job description below, create a comprehensive 30-60-90 day onboarding plan for the new hire. The plan should be structured to set them up for success in a fast-paced content creation environment.

- **First 30 Days (Focus on Learning):** Goals should revolve around understanding the {brand.name} brand voice, content workflow, tools, and audience. Include tasks like reviewing top-performing videos, meeting key team members, understanding the style guide, and shadowing a video project from concept to publish.
- **First 60 Days (Focus on Contributing):** Goals should transition to active participation and contribution. Include tasks like taking on smaller assignments (e.g., editing a segment, researching a topic), collaborating on a full video project, and presenting initial work for feedback.
- **First 90 Days (Focus on Owning):** Goals should focus on autonomy and initiative. Include tasks like leading a small project (e.g., scripting or editing a video solo), proposing new video ideas or format improvements, and demonstrating mastery of their core responsibilities.

Use clear markdown bullet points for each section to outline specific, actionable goals.

Job Description:
---
{job_description}
---

Return the onboarding plan in the specified JSON format."""
