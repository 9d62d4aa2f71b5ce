"""Generation and reset handlers."""

import logging
from collections.abc import AsyncIterator

from standia.core.exceptions import GenerationInProgressError, PhaseError

from ..models import UIState
from ..state import initialize_ui_state, reset_ui_state
from .view import format_error, render_view

logger = logging.getLogger(__name__)


async def generate_phase(state: UIState) -> AsyncIterator[tuple]:
    """Generate the image for the session's current phase.

    One handler serves all four phases; the controller decides which inputs
    and instructions apply. The loader is shown first, then the view is
    re-rendered from whatever state the controller ends up in. If the
    session was reset while the request was in flight, that is the fresh
    phase 1 view.

    Args:
        state: UI state

    Yields:
        View updates (``VIEW_OUTPUTS`` order) followed by the updated state
    """
    try:
        state = initialize_ui_state(state)
    except Exception as e:
        logger.error(f"Error initializing session: {e}", exc_info=True)
        yield (*render_view(state, notice=format_error("Error", str(e))), state)
        return

    controller = state.controller
    logger.info(f"Generate requested at phase {controller.phase}")
    yield (*render_view(state, loading=True), state)

    try:
        outcome = await controller.submit()
        if outcome is None:
            logger.info("Generation result discarded after reset")

    except (GenerationInProgressError, PhaseError) as e:
        logger.warning(f"Generate refused: {e}")
        yield (*render_view(state, notice=format_error("Cannot Generate", str(e))), state)
        return

    except Exception as e:
        # Unexpected error
        logger.error(f"Error generating image: {e}", exc_info=True)
        error_msg = (
            f"An unexpected error occurred. Check logs for details.\n\n`{str(e)}`"
        )
        yield (*render_view(state, notice=format_error("Error", error_msg)), state)
        return

    yield (*render_view(state), state)


def reset_session(state: UIState) -> tuple:
    """Start a new briefing, discarding all generated images and inputs.

    Args:
        state: UI state

    Returns:
        View updates (``VIEW_OUTPUTS`` order) followed by the updated state
    """
    try:
        state = reset_ui_state(state)
    except Exception as e:
        logger.error(f"Error resetting session: {e}", exc_info=True)
        return (*render_view(state, notice=format_error("Error", str(e))), state)
    return (*render_view(state), state)


def refresh_view(state: UIState) -> tuple:
    """Re-render the view for a (possibly new) session on page load."""
    return (*render_view(state), state)
