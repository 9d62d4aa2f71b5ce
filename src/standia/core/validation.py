"""Validation of user-supplied inputs.

Both checks run locally and never contact the generation service.
"""

import logging

from .exceptions import ValidationError
from .models import InputBundle, InputFile, InputSlot
from .phases import REQUIRED_INPUT_MESSAGES, get_phase

logger = logging.getLogger(__name__)

# Accepted upload types per slot
ACCEPTED_MIME_TYPES: dict[InputSlot, frozenset[str]] = {
    InputSlot.BRIEFING: frozenset({"application/pdf"}),
    InputSlot.LOGO: frozenset({"image/png", "image/jpeg", "image/svg+xml"}),
    InputSlot.REFERENCE: frozenset({"image/png", "image/jpeg"}),
}

# Same table as extensions, for the file pickers
ACCEPTED_EXTENSIONS: dict[InputSlot, list[str]] = {
    InputSlot.BRIEFING: [".pdf"],
    InputSlot.LOGO: [".png", ".jpg", ".jpeg", ".svg"],
    InputSlot.REFERENCE: [".png", ".jpg", ".jpeg"],
}

_SLOT_LABELS = {
    InputSlot.BRIEFING: "Briefing",
    InputSlot.LOGO: "Logo",
    InputSlot.REFERENCE: "Reference image",
}


def validate_phase_inputs(phase: int, bundle: InputBundle) -> None:
    """Check that every input the phase requires is present.

    Args:
        phase: Phase about to be submitted (1-4)
        bundle: Inputs collected so far

    Raises:
        ValidationError: For the first missing required input
        PhaseError: If the phase is not a generation phase
    """
    spec = get_phase(phase)
    for slot in spec.required_slots:
        if bundle.get(slot) is None:
            raise ValidationError(REQUIRED_INPUT_MESSAGES[slot])


def validate_upload(slot: InputSlot, file: InputFile) -> None:
    """Check that an uploaded file is acceptable for its slot.

    Args:
        slot: Slot the file is being stored in
        file: The uploaded file

    Raises:
        ValidationError: If the file is empty or of the wrong type
    """
    label = _SLOT_LABELS[slot]
    if not file.data:
        raise ValidationError(f"{label} file '{file.name}' is empty.")

    accepted = ACCEPTED_MIME_TYPES[slot]
    if file.mime_type not in accepted:
        logger.warning(f"Rejected {slot.value} upload {file.name} ({file.mime_type})")
        allowed = ", ".join(ACCEPTED_EXTENSIONS[slot])
        raise ValidationError(
            f"{label} file '{file.name}' has unsupported type {file.mime_type}. "
            f"Accepted: {allowed}"
        )
