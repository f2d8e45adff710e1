"""Prompt and output schema for hiring kit generation."""

from __future__ import annotations

import copy

from recruit_kit.config import BrandConfig
from recruit_kit.models.hiring_kit import Seniority

HIRING_KIT_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "jobDescription": {
            "type": "string",
            "description": (
                "A complete, candidate-friendly job description for LinkedIn. Use markdown "
                "for headings and bullets. Include sections like 'What You'll Do', "
                "'What We're Looking For', and 'Why You'll Love {brand}'."
            ),
        },
        "interviewScorecard": {
            "type": "array",
            "description": (
                "An array of 3-5 core competencies for the role. Each competency should have "
                "2-3 tailored behavioral interview questions and a scoring rubric."
            ),
            "items": {
                "type": "object",
                "properties": {
                    "competency": {
                        "type": "string",
                        "description": (
                            "A core competency required for the role "
                            "(e.g., 'Video Editing Mastery', 'Creative Storytelling')."
                        ),
                    },
                    "questions": {
                        "type": "array",
                        "description": "An array of 2-3 behavioral questions to assess this competency.",
                        "items": {"type": "string"},
                    },
                    "scoringRubric": {
                        "type": "object",
                        "description": "Criteria for evaluating a candidate's response.",
                        "properties": {
                            "weak": {
                                "type": "string",
                                "description": "Description of a weak or unsatisfactory answer.",
                            },
                            "average": {
                                "type": "string",
                                "description": "Description of an average or satisfactory answer.",
                            },
                            "strong": {
                                "type": "string",
                                "description": "Description of a strong or excellent answer.",
                            },
                        },
                        "required": ["weak", "average", "strong"],
                    },
                },
                "required": ["competency", "questions", "scoringRubric"],
            },
        },
        "emailTemplates": {
            "type": "object",
            "description": "Professional and candidate-friendly email templates.",
            "properties": {
                "nextSteps": {
                    "type": "string",
                    "description": (
                        "An email template for candidates who are moving on to the next stage. "
                        "It should be encouraging and clearly state the next steps."
                    ),
                },
                "rejection": {
                    "type": "string",
                    "description": (
                        "A respectful and constructive rejection email template for unsuccessful "
                        "candidates. It should thank them for their time and offer encouragement."
                    ),
                },
            },
            "required": ["nextSteps", "rejection"],
        },
    },
    "required": ["jobDescription", "interviewScorecard", "emailTemplates"],
}

SENIORITY_GUIDANCE: dict[Seniority, str] = {
    Seniority.JUNIOR: (
        "focus on foundational skills, learning opportunities, and assisting senior members. "
        "Requirements should be for ~1-2 years of experience or strong portfolio projects."
    ),
    Seniority.MID_LEVEL: (
        "expect solid proficiency, autonomy on tasks, and ~3-5 years of relevant experience."
    ),
    Seniority.SENIOR: (
        "emphasize leadership, mentorship, strategic thinking, and complex problem-solving. "
        "Require 5+ years of experience and a track record of significant impact."
    ),
}


def build_hiring_kit_prompt(
    notes: str,
    company_context: str,
    seniority: Seniority | str,
    brand: BrandConfig = BrandConfig(),
) -> str:
    """Build the instruction for a complete hiring kit.

    ``seniority`` accepts the enum or its label ("Junior", "Mid-Level",
    "Senior"); any other label raises ValueError.
    """
    level = Seniority(seniority)
    guidance = "\n".join(
        f"          - For a **'{lvl.value}'** role, {text}" for lvl, text in SENIORITY_GUIDANCE.items()
    )
    return f"""You are an expert recruitment strategist for {brand.name}, {brand.description}.
Here is some context about the company:
---
{company_context}
---

Your task is to generate a complete "Hiring Kit" in JSON format based on the company context, raw job notes, and the specified seniority level. The tone should be energetic, authentic, and appealing to an audience passionate about technology.

**Seniority Level:** {level.value}

**Raw Notes:**
---
{notes}
---

**Instructions:**
Based on all the provided information, create a Hiring Kit with three components. The seniority level MUST significantly influence the final output:
1.  **Job Description**: A polished, engaging job description for LinkedIn.
{guidance}
          - Use markdown headings (e.g., #, ##) and bullet points (-). Include sections like "What You'll Do", "What We're Looking For", and "Why You'll Love {brand.name}".

2.  **Interview Scorecard**: Identify 3-5 core competencies. For each competency, create:
    a. 2-3 insightful behavioral interview questions. These questions should vary in complexity based on seniority. Senior-level questions should probe more into strategy, leadership, and handling ambiguity.
    b. A scoring rubric ("Weak", "Average", "Strong"). The expectations for a "Strong" answer must be higher for a senior role.

3.  **Email Templates**:
    a. **Next Steps Email**: A friendly and professional email for successful candidates.
    b. **Rejection Email**: A respectful, empathetic rejection email for unsuccessful candidates.

Return the entire Hiring Kit in the specified JSON format."""


def hiring_kit_schema(brand: BrandConfig = BrandConfig()) -> dict:
    """Return the hiring kit schema with the brand name filled into descriptions."""
    schema = copy.deepcopy(HIRING_KIT_SCHEMA)
    jd = schema["properties"]["jobDescription"]
    jd["description"] = jd["description"].format(brand=brand.name)
    return schema
