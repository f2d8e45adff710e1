"""Prompt and output schema for screening a resume against a hiring kit."""

from __future__ import annotations

from collections.abc import Sequence

from recruit_kit.config import BrandConfig

RESUME_ANALYSIS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "summary": {
            "type": "string",
            "description": (
                "A concise 2-3 sentence summary of the candidate's suitability for the role, "
                "based on their resume and the job description."
            ),
        },
        "competencyMatches": {
            "type": "array",
            "description": (
                "An array analyzing the candidate's alignment with each core competency "
                "from the interview scorecard."
            ),
            "items": {
                "type": "object",
                "properties": {
                    "competency": {
                        "type": "string",
                        "description": "The core competency being assessed.",
                    },
                    "match": {
                        "type": "string",
                        "description": (
                            "A rating of the candidate's alignment "
                            "(e.g., 'Strong Match', 'Good Match', 'Potential Gap')."
                        ),
                    },
                    "evidence": {
                        "type": "string",
                        "description": (
                            "Specific evidence or keywords from the resume that support this "
                            "rating. Mention missing evidence if it's a gap."
                        ),
                    },
                },
                "required": ["competency", "match", "evidence"],
            },
        },
        "suggestedQuestions": {
            "type": "array",
            "description": (
                "An array of 2-3 tailored interview questions to ask the candidate. These should "
                "probe into areas of strength or potential gaps identified in the resume."
            ),
            "items": {"type": "string"},
        },
    },
    "required": ["summary", "competencyMatches", "suggestedQuestions"],
}


def build_resume_analysis_prompt(
    resume_text: str,
    job_description: str,
    competencies: Sequence[str],
    brand: BrandConfig = BrandConfig(),
) -> str:
    """Build the resume screening instruction.

    ``competencies`` steers the per-competency ratings; it is usually the
    competency column of the kit's interview scorecard.
    """
    competency_list = ", ".join(competencies)
    return f"""You are an expert HR analyst and recruiter for {brand.name}, {brand.description}. Your task is to analyze a candidate's resume against a specific job description and a set of core competencies. Provide a structured, unbiased analysis in JSON format.

**Job Description:**
---
{job_description}
---

**Core Competencies for the Role:**
---
{competency_list}
---

**Candidate's Resume:**
---
{resume_text}
---

**Analysis Instructions:**
1.  **Summary:** Write a concise 2-3 sentence summary of the candidate's overall fit for the role.
2.  **Competency Matches:** For each of the core competencies, provide a match rating ('Strong Match', 'Good Match', 'Potential Gap') and cite specific evidence (or lack thereof) from the resume.
3.  **Suggested Questions:** Generate 2-3 specific, insightful interview questions based on the resume. These questions should be designed to probe deeper into their stated experience or explore potential gaps you've identified.

Return the complete analysis in the specified JSON format."""
