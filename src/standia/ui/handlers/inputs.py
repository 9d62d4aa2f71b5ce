"""File selection handlers for the briefing, logo and reference pickers."""

import logging
from typing import Any

import gradio as gr

from standia.core.exceptions import ValidationError
from standia.core.models import InputSlot

from ..adapters import upload_to_input_file
from ..models import UIState
from ..state import initialize_ui_state
from .view import format_error

logger = logging.getLogger(__name__)


def select_input(slot: InputSlot, value: Any, state: UIState) -> tuple[dict, dict, UIState]:
    """Store an uploaded (or cleared) file in the session's input bundle.

    Args:
        slot: Which input the picker feeds
        value: Upload value from the gr.File component (path or None)
        state: UI state

    Returns:
        Tuple of (status_update, picker_update, updated_state). A rejected
        upload is shown in the status panel and the picker is emptied.
    """
    try:
        state = initialize_ui_state(state)
        file = upload_to_input_file(value)
        state.controller.set_input(slot, file)
        if file is None:
            # Cleared; leave the status panel as is
            return gr.update(), gr.update(), state
        return gr.update(value="", visible=False), gr.update(), state

    except ValidationError as e:
        logger.warning(f"Upload rejected for {slot.value}: {e}")
        state.controller.set_input(slot, None)
        return (
            gr.update(value=format_error("Validation Error", str(e)), visible=True),
            gr.update(value=None),
            state,
        )

    except OSError as e:
        logger.error(f"Could not read {slot.value} upload: {e}", exc_info=True)
        return (
            gr.update(value=format_error("Error", f"Could not read the uploaded file: {e}"), visible=True),
            gr.update(value=None),
            state,
        )


def select_briefing(value: Any, state: UIState) -> tuple[dict, dict, UIState]:
    """Handle a change of the briefing PDF picker."""
    return select_input(InputSlot.BRIEFING, value, state)


def select_logo(value: Any, state: UIState) -> tuple[dict, dict, UIState]:
    """Handle a change of the company logo picker."""
    return select_input(InputSlot.LOGO, value, state)


def select_reference(value: Any, state: UIState) -> tuple[dict, dict, UIState]:
    """Handle a change of the reference image picker (phases 2-4)."""
    return select_input(InputSlot.REFERENCE, value, state)
