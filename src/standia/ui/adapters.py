"""Adapter functions for converting between UI values and core objects."""

import logging
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from standia.core.models import GenerationArtifact, InputFile
from standia.core.phases import PHASES

logger = logging.getLogger(__name__)


def _upload_path(value: Any) -> str | None:
    # gr.File(type="filepath") gives a str; older payloads may carry a .name
    if value is None or value == "":
        return None
    if isinstance(value, (str, Path)):
        return str(value)
    return getattr(value, "path", None) or getattr(value, "name", None)


def upload_to_input_file(value: Any) -> InputFile | None:
    """Convert a Gradio upload value to an InputFile.

    Args:
        value: File path (or file-like payload) from a gr.File component

    Returns:
        InputFile with the uploaded bytes, or None if nothing is selected
    """
    path = _upload_path(value)
    if path is None:
        return None
    return InputFile.from_path(path)


def artifact_to_image(artifact: GenerationArtifact | None) -> Image.Image | None:
    """Decode an artifact for display in a gr.Image component.

    Returns None (and logs) if the bytes cannot be decoded.
    """
    if artifact is None:
        return None
    try:
        return artifact.to_image()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Could not decode phase {artifact.phase} image: {e}")
        return None


def artifacts_to_gallery(artifacts: list[GenerationArtifact]) -> list[tuple[Image.Image, str]]:
    """Build (image, caption) pairs for the results gallery.

    Captions come from the phase table so each image is labelled with the
    camera it was rendered from.
    """
    gallery = []
    for index, artifact in enumerate(artifacts, start=1):
        image = artifact_to_image(artifact)
        if image is not None:
            gallery.append((image, PHASES[index].caption))
    return gallery
