"""Gradio UI for Stand IA."""

import logging

import gradio as gr

from standia.core.config import config
from standia.core.exceptions import MissingCredentialsError

from .components import WizardUI
from .handlers import (
    generate_phase,
    refresh_view,
    reset_session,
    select_briefing,
    select_logo,
    select_reference,
)
from .models import APP_TITLE, UIState

logger = logging.getLogger(__name__)


def create_ui() -> tuple[gr.Blocks, str]:
    """Create the Gradio UI.

    Returns:
        Tuple of (Gradio Blocks app, custom CSS string)
    """
    custom_css = """
    .status-panel {
        border: 1px solid #b91c1c;
        border-radius: 6px;
        padding: 12px;
    }
    """

    app = gr.Blocks(title=APP_TITLE)

    with app:
        # Session state - one instance per user
        ui_state = gr.State(UIState())

        wizard = WizardUI()
        view_outputs = wizard.view_outputs() + [ui_state]

        # File pickers feed the session's input bundle
        for picker, handler in (
            (wizard.briefing_file, select_briefing),
            (wizard.logo_file, select_logo),
            (wizard.reference_file, select_reference),
        ):
            picker.change(
                fn=handler,
                inputs=[picker, ui_state],
                outputs=[wizard.status, picker, ui_state],
            )

        # One generate handler for all phases
        gr.on(
            triggers=[wizard.start_btn.click, wizard.generate_btn.click],
            fn=generate_phase,
            inputs=[ui_state],
            outputs=view_outputs,
            concurrency_limit=None,
        )

        # Reset is never blocked by an in-flight generation
        wizard.reset_btn.click(
            fn=reset_session,
            inputs=[ui_state],
            outputs=view_outputs,
            concurrency_limit=None,
        )

        app.load(fn=refresh_view, inputs=[ui_state], outputs=view_outputs)

    return app, custom_css


def configure_logging() -> None:
    """Configure root logging from the application config."""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main():
    """Main entry point for the application."""
    configure_logging()
    logger.info("Starting Stand IA...")
    logger.info(f"Configuration: {config.model_dump(exclude={'gemini_api_key'})}")

    try:
        config.require_api_key()
    except MissingCredentialsError as e:
        logger.error(str(e))
        raise SystemExit(1) from e

    app, custom_css = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
        css=custom_css,
    )


if __name__ == "__main__":
    main()
