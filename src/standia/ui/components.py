"""Reusable UI components for the Stand IA Gradio interface."""

import gradio as gr

from standia.core.models import InputSlot
from standia.core.validation import ACCEPTED_EXTENSIONS

from .models import RESULTS_HEADING, VIEW_OUTPUTS


class WizardUI:
    """All components of the four-phase wizard.

    The wizard has three screens, of which only one is visible at a time:

    - Briefing: briefing PDF (required) and company logo (optional)
    - Review & upload: the latest render plus a reference picker. This one
      screen serves phases 2, 3 and 4; its labels are updated per phase.
    - Results: gallery of all four renders

    A loader and a status panel sit above the screens, and the
    "New Briefing" button in the header resets the session.
    """

    def __init__(self):
        """Build the wizard components inside the current Blocks context."""
        with gr.Row():
            with gr.Column(scale=4):
                gr.Markdown(
                    """
                    # Stand **IA** Architect
                    ### Consistent multi-angle renders of an exhibition stand from a briefing PDF
                    """
                )
            with gr.Column(scale=1, min_width=160):
                self.reset_btn = gr.Button("New Briefing", variant="secondary", visible=False)

        self.loader = gr.Markdown(visible=False)
        self.status = gr.Markdown(visible=False, elem_classes="status-panel")

        # Briefing screen (phase 1)
        with gr.Group(visible=True) as self.briefing_group:
            gr.Markdown(
                "Provide a PDF with the stand details and an optional logo. "
                "The AI will generate a series of consistent renders based on your files."
            )
            with gr.Row():
                self.briefing_file = gr.File(
                    label="Briefing PDF (Required)",
                    file_types=ACCEPTED_EXTENSIONS[InputSlot.BRIEFING],
                    type="filepath",
                )
                self.logo_file = gr.File(
                    label="Company Logo (Optional)",
                    file_types=ACCEPTED_EXTENSIONS[InputSlot.LOGO],
                    type="filepath",
                )
            self.start_btn = gr.Button("Start Generation Process", variant="primary", size="lg")

        # Review & upload screen (phases 2-4)
        with gr.Group(visible=False) as self.review_group:
            self.review_heading = gr.Markdown()
            with gr.Row():
                with gr.Column(scale=2):
                    self.latest_image = gr.Image(
                        label="Latest Render",
                        type="pil",
                        interactive=False,
                        height=420,
                        format="png",
                    )
                with gr.Column(scale=1):
                    gr.Markdown("*Upload the image you just downloaded to ensure consistency.*")
                    self.reference_file = gr.File(
                        label="Reference Image (Required)",
                        file_types=ACCEPTED_EXTENSIONS[InputSlot.REFERENCE],
                        type="filepath",
                    )
                    self.generate_btn = gr.Button("Generate Image", variant="primary", size="lg")

        # Results screen (complete)
        with gr.Group(visible=False) as self.results_group:
            gr.Markdown(RESULTS_HEADING)
            self.results_gallery = gr.Gallery(
                label="Renders",
                columns=2,
                rows=2,
                height="auto",
                object_fit="contain",
                format="png",
            )

    def view_outputs(self) -> list:
        """Components updated by render_view, in ``VIEW_OUTPUTS`` order."""
        return [getattr(self, name) for name in VIEW_OUTPUTS]
