"""Data models for Stand IA UI state."""

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class UIState:
    """Session state for the Gradio UI.

    Each user gets their own UIState instance (via ``gr.State``), so every
    browser session drives its own phase controller.

    Attributes
    ----------
    controller : Any | None
        PhaseController instance, created lazily on first use
    """

    controller: Any | None = None  # PhaseController instance

    def is_initialized(self) -> bool:
        """Check if the session's controller has been created."""
        return self.controller is not None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"UIState(initialized={self.is_initialized()}, controller={self.controller!r})"


# Order of the components updated by every view render. Handlers return
# tuples in this order; WizardUI.view_outputs() lists components in it too.
VIEW_OUTPUTS = (
    "loader",
    "status",
    "briefing_group",
    "briefing_file",
    "logo_file",
    "review_group",
    "review_heading",
    "latest_image",
    "reference_file",
    "generate_btn",
    "results_group",
    "results_gallery",
    "reset_btn",
)

APP_TITLE = "Stand IA Architect"
RESULTS_HEADING = "### All images generated successfully!"
