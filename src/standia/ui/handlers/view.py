"""Rendering of the wizard view from session state.

Every handler finishes by calling :func:`render_view`, which maps the
controller's state onto component updates in ``VIEW_OUTPUTS`` order. Exactly
one screen is visible at a time: briefing (phase 1), review & upload
(phases 2-4) or results (complete). The loader replaces all three while a
request is in flight.
"""

import logging

import gradio as gr

from standia.core.models import FailureKind, InputBundle
from standia.core.phases import PHASE_COUNT, PHASES, is_terminal

from ..adapters import artifact_to_image, artifacts_to_gallery
from ..models import VIEW_OUTPUTS, UIState

logger = logging.getLogger(__name__)

ERROR_TITLES = {
    FailureKind.VALIDATION: "Validation Error",
    FailureKind.STOPPED: "Generation Stopped",
    FailureKind.BLOCKED: "Generation Blocked",
    FailureKind.EMPTY: "No Image Generated",
    FailureKind.TRANSPORT: "Error",
}


def format_error(title: str, message: str) -> str:
    """Format an error as markdown for the status panel."""
    return f"❌ **{title}**\n\n{message}"


def loading_text(phase: int) -> str:
    """Loader message for the phase being generated."""
    if 1 <= phase <= PHASE_COUNT:
        return f"⏳ **Generating Image {phase} of {PHASE_COUNT}:** {PHASES[phase].camera_id}"
    return "⏳ **Preparing to generate remaining images...**"


def review_heading(phase: int) -> str:
    """Heading for the review & upload screen of a phase (2-4)."""
    previous = phase - 1
    return (
        f"### Phase {previous} Complete: {PHASES[previous].camera_id}\n"
        f"Download the image below, then upload it as a reference to generate "
        f"the next camera angle for Phase {phase}."
    )


def _picker_update(held, **kwargs) -> dict:
    # Leave a picker alone while its file is held; empty it once the slot is cleared
    if held is None:
        kwargs["value"] = None
    return gr.update(**kwargs)


def render_view(state: UIState | None, loading: bool = False, notice: str | None = None) -> tuple:
    """Build component updates for the current session state.

    Args:
        state: UI state (an uninitialized state renders as a fresh phase 1)
        loading: Force the loader on (used before the controller starts)
        notice: Markdown shown in the status panel instead of the controller error

    Returns:
        Tuple of updates in ``VIEW_OUTPUTS`` order
    """
    controller = state.controller if state is not None else None

    if controller is not None:
        phase = controller.phase
        artifacts = controller.artifacts
        bundle = controller.inputs
        loading = loading or controller.is_loading
        has_started = controller.has_started or loading
        error, error_kind = controller.error, controller.error_kind
    else:
        phase, artifacts, bundle = 1, [], InputBundle()
        has_started = loading
        error, error_kind = None, None

    complete = is_terminal(phase)
    show_briefing = not loading and phase == 1
    show_review = not loading and 1 < phase <= PHASE_COUNT
    show_results = not loading and complete

    if notice:
        status = notice
    elif error and not loading:
        status = format_error(ERROR_TITLES.get(error_kind, "Error"), error)
    else:
        status = ""

    if show_review:
        latest = artifacts[-1]
        latest_image = gr.update(
            value=artifact_to_image(latest),
            label=f"Phase {phase - 1}: {PHASES[phase - 1].caption}",
        )
        heading = gr.update(value=review_heading(phase))
        reference = _picker_update(bundle.reference, label=f"Reference for Phase {phase}")
        generate_btn = gr.update(value=f"Generate Phase {phase} Image", interactive=True)
    else:
        latest_image = gr.update()
        heading = gr.update()
        reference = _picker_update(bundle.reference)
        generate_btn = gr.update(interactive=not loading)

    updates = {
        "loader": gr.update(visible=True, value=loading_text(phase)) if loading else gr.update(visible=False),
        "status": gr.update(value=status, visible=bool(status)),
        "briefing_group": gr.update(visible=show_briefing),
        "briefing_file": _picker_update(bundle.briefing),
        "logo_file": _picker_update(bundle.logo),
        "review_group": gr.update(visible=show_review),
        "review_heading": heading,
        "latest_image": latest_image,
        "reference_file": reference,
        "generate_btn": generate_btn,
        "results_group": gr.update(visible=show_results),
        "results_gallery": gr.update(value=artifacts_to_gallery(artifacts)) if show_results else gr.update(),
        "reset_btn": gr.update(visible=has_started),
    }
    return tuple(updates[name] for name in VIEW_OUTPUTS)
