"""State management utilities for Stand IA UI.

This module handles the lazy initialization of per-session state: the phase
controller and the Gemini client behind it.
"""

import logging

from standia.core.config import config
from standia.core.controller import PhaseController
from standia.core.gemini_client import GeminiImageClient

from .models import UIState

logger = logging.getLogger(__name__)


def initialize_ui_state(state: UIState | None = None) -> UIState:
    """Initialize or ensure UI state is ready.

    If state is None or has no controller yet, a controller backed by a new
    GeminiImageClient is created.

    Args:
        state: Existing UIState or None

    Returns:
        Initialized UIState instance

    Raises:
        MissingCredentialsError: If no Gemini API key is configured
    """
    if state is None:
        logger.info("Creating new UIState")
        state = UIState()

    if state.is_initialized():
        logger.debug("UIState already initialized")
        return state

    logger.info(f"Initializing PhaseController with model {config.model_id}")
    state.controller = PhaseController(GeminiImageClient(config))
    logger.info(f"UIState initialization complete: {state}")
    return state


def reset_ui_state(state: UIState | None) -> UIState:
    """Reset the session to phase 1.

    Safe to call while a request is in flight: the controller discards the
    late result.

    Args:
        state: UI state (may be uninitialized)

    Returns:
        The same state, reset
    """
    state = initialize_ui_state(state)
    state.controller.reset()
    return state
