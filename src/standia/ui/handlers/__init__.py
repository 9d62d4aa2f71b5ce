"""UI event handlers organized by feature area.

This package provides handlers for all Gradio UI events:
- generation: Phase generation and session reset
- inputs: Briefing, logo and reference file pickers
- view: Rendering the wizard screens from session state
"""

from .generation import generate_phase, refresh_view, reset_session
from .inputs import select_briefing, select_input, select_logo, select_reference
from .view import format_error, loading_text, render_view, review_heading

__all__ = [
    # Generation handlers
    "generate_phase",
    "refresh_view",
    "reset_session",
    # Input handlers
    "select_briefing",
    "select_input",
    "select_logo",
    "select_reference",
    # View rendering
    "format_error",
    "loading_text",
    "render_view",
    "review_heading",
]
