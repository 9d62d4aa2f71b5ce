"""Data model for the phase workflow.

The types here sit on the two external boundaries of the system: files handed
in by the user (``InputFile``) and images handed back by the generation
service (``GenerationArtifact``). ``Success`` and ``Failure`` carry the result
of a single request.
"""

import base64
import io
import logging
import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


class InputSlot(str, Enum):
    """User-supplied inputs the wizard can collect."""

    BRIEFING = "briefing"
    LOGO = "logo"
    REFERENCE = "reference"


@dataclass(frozen=True)
class InputFile:
    """A user-selected file reduced to what a request needs.

    Attributes:
        name: Original filename (for display and logging only)
        mime_type: MIME type sent alongside the bytes
        data: Raw file contents
    """

    name: str
    mime_type: str
    data: bytes = field(repr=False)

    @classmethod
    def from_path(cls, path: str | Path) -> "InputFile":
        """Read a file from disk and detect its MIME type.

        The extension is checked first. Images without a known extension are
        sniffed with Pillow, anything else becomes ``application/octet-stream``.

        Args:
            path: Path to the uploaded file

        Returns:
            InputFile with the file's bytes
        """
        path = Path(path)
        data = path.read_bytes()
        mime_type, _ = mimetypes.guess_type(path.name)
        if mime_type is None:
            mime_type = _sniff_image_mime_type(data) or "application/octet-stream"
        return cls(name=path.name, mime_type=mime_type, data=data)

    @property
    def size(self) -> int:
        return len(self.data)


def _sniff_image_mime_type(data: bytes) -> str | None:
    try:
        with Image.open(io.BytesIO(data)) as img:
            return Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError):
        return None


@dataclass
class InputBundle:
    """Inputs collected for the current phase.

    Phase 1 uses ``briefing`` and ``logo``; phases 2-4 use ``reference``.
    """

    briefing: InputFile | None = None
    logo: InputFile | None = None
    reference: InputFile | None = None

    def get(self, slot: InputSlot) -> InputFile | None:
        return getattr(self, slot.value)

    def set(self, slot: InputSlot, file: InputFile | None) -> None:
        setattr(self, slot.value, file)

    def clear_reference(self) -> None:
        """Empty the reference slot so the next phase starts without one."""
        self.reference = None

    def clear(self) -> None:
        self.briefing = None
        self.logo = None
        self.reference = None


@dataclass(frozen=True)
class GenerationArtifact:
    """One generated image, never mutated after creation.

    Attributes:
        data: Decoded image bytes
        mime_type: MIME type reported by the service
        phase: Phase that produced the image (0 if unknown)
    """

    data: bytes = field(repr=False)
    mime_type: str = "image/png"
    phase: int = 0

    def to_base64(self) -> str:
        """Return the image as a base64 string."""
        return base64.b64encode(self.data).decode("ascii")

    def to_image(self) -> Image.Image:
        """Decode the image with Pillow for display.

        Raises:
            PIL.UnidentifiedImageError: If the bytes are not a readable image
        """
        img = Image.open(io.BytesIO(self.data))
        img.load()
        return img


@dataclass
class GenerationRequest:
    """A fully built request for one phase.

    Attributes:
        phase: Phase number the request was built for
        system_instruction: Fixed phase-specific instruction text
        parts: Ordered content parts (google-genai ``types.Part``)
    """

    phase: int
    system_instruction: str
    parts: list[Any]


class FailureKind(str, Enum):
    """Where a failed request was stopped."""

    VALIDATION = "validation"  # rejected locally, no network call
    STOPPED = "stopped"  # candidate finished with a non-STOP reason
    BLOCKED = "blocked"  # prompt blocked by the service
    EMPTY = "empty"  # no image and no explanation
    TRANSPORT = "transport"  # network or unexpected client error


@dataclass(frozen=True)
class Success:
    artifact: GenerationArtifact

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    message: str
    kind: FailureKind = FailureKind.TRANSPORT

    @property
    def ok(self) -> bool:
        return False


RequestOutcome = Union[Success, Failure]
