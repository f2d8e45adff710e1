"""Copy buffers and downloadable renderings of a hiring kit."""
from recruit_kit.export.kit_export import (
    export_filename,
    render_kit_html,
    render_kit_markdown,
)
from recruit_kit.export.plain_text import onboarding_to_text, scorecard_to_text

__all__ = [
    "export_filename",
    "onboarding_to_text",
    "render_kit_html",
    "render_kit_markdown",
    "scorecard_to_text",
]
