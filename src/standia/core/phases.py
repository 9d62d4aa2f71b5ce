"""Phase table for the four-step render workflow.

Phase 1 renders the canonical stand from the briefing PDF (and optional logo).
Phases 2-4 re-render that same stand from a new camera position, seeded with a
reference image the user uploads. Everything that differs between phases lives
in ``PHASES``; code that drives the workflow looks phases up instead of
branching on their number.

The current phase is never stored. It is derived from the number of images
generated so far, see :func:`phase_for_artifact_count`.
"""

from dataclasses import dataclass

from .exceptions import PhaseError
from .models import InputSlot

PHASE_COUNT = 4
TERMINAL_PHASE = PHASE_COUNT + 1

REQUIRED_INPUT_MESSAGES = {
    InputSlot.BRIEFING: "Briefing PDF is required.",
    InputSlot.LOGO: "Company logo is required.",
    InputSlot.REFERENCE: "Reference image for this phase is required.",
}


@dataclass(frozen=True)
class PhaseSpec:
    """Everything that is specific to one phase.

    Attributes:
        number: Phase number (1-4)
        camera_id: Short camera label used as the gallery caption
        camera_notes: Human-readable camera parameters
        input_slots: Inputs sent with the request, in part order
        required_slots: Subset of ``input_slots`` that must be present
        system_instruction: Fixed system instruction for the model
        user_instruction: Text part appended after the binary parts
    """

    number: int
    camera_id: str
    camera_notes: str
    input_slots: tuple[InputSlot, ...]
    required_slots: tuple[InputSlot, ...]
    system_instruction: str
    user_instruction: str

    @property
    def caption(self) -> str:
        return f"{self.camera_id} · {self.camera_notes}"


_BRIEFING_SYSTEM_INSTRUCTION = """\
You are "Stand IA". Read the attached PDF briefing and the attached logo, if any. \
Generate ONE realistic, functional base image of an exhibition stand placed inside \
a corporate pavilion. Prioritise: feasibility, visitor flow, accessibility \
(circulation >= 1.20 m), plausible zoning and media (LED walls, totems). \
Do not render legible text or real brand marks; if a brand mark is needed, use a \
barely legible "MC Stands". Default environment: modern pavilion, grey vinyl/epoxy \
floor, white ceiling with spotlights, generic blurred neighbouring stands.
Generate only ONE image from this angle: frontal isometric (~35°), camera height \
1.60 m, 35mm lens, 16:9 aspect ratio (e.g. 1920x1080). Do not produce any other \
views in this phase.
If the PDF lacks critical measurements, assume realistic proportions and keep them \
in your mental frame without inventing explicit numbers."""

_BRIEFING_USER_INSTRUCTION = """\
Goal: create the canonical scene of the stand with materials, palette, volumetry \
and zoning consistent with the briefing.
Instructions: generate only 1 image (base). No variations. No additional text."""

_CAMERA_SYSTEM_INSTRUCTION = """\
You are "Stand IA", an architectural rendering engine. Your task is to recreate the \
stand in the reference image from a NEW CAMERA ANGLE.
Consistency is CRITICAL. Do NOT change the stand's design, materials, colours, \
lighting or layout. The only change allowed is the camera.
[CAMERA] Position: {camera}
[GOAL] The result must be a photorealistic, cinematic render with physically \
correct perspective, {goal}.
[OUTPUT] Generate a single image in 16:9 aspect ratio (e.g. 1920x1080)."""

_CAMERA_USER_INSTRUCTION = (
    "The reference image is attached. Render the same stand, changing only the camera "
    "to the '{view}'. Keep absolute consistency with the reference."
)


def _camera_phase(
    number: int, camera_id: str, camera_notes: str, camera: str, goal: str, view: str
) -> PhaseSpec:
    """Build one of the reference-driven phases (2-4).

    These phases share input shape and instruction text, differing only in
    camera wording.
    """
    return PhaseSpec(
        number=number,
        camera_id=camera_id,
        camera_notes=camera_notes,
        input_slots=(InputSlot.REFERENCE,),
        required_slots=(InputSlot.REFERENCE,),
        system_instruction=_CAMERA_SYSTEM_INSTRUCTION.format(camera=camera, goal=goal),
        user_instruction=_CAMERA_USER_INSTRUCTION.format(view=view),
    )


PHASES: dict[int, PhaseSpec] = {
    1: PhaseSpec(
        number=1,
        camera_id="CAM-01-FRONTAL",
        camera_notes="Frontal isometric ~35°, height 1.60 m, 35mm",
        input_slots=(InputSlot.BRIEFING, InputSlot.LOGO),
        required_slots=(InputSlot.BRIEFING,),
        system_instruction=_BRIEFING_SYSTEM_INSTRUCTION,
        user_instruction=_BRIEFING_USER_INSTRUCTION,
    ),
    2: _camera_phase(
        2,
        camera_id="CAM-02-OBLIQUE-LEFT",
        camera_notes="Oblique-left isometric 45°, height 1.60 m, 35mm",
        camera=(
            "oblique-left isometric view (45 degrees to the left). Keep the camera "
            "height (approx. 1.60 m) and the lens (35mm)."
        ),
        goal="showing the left side and the depth of the stand",
        view="oblique-left isometric view",
    ),
    3: _camera_phase(
        3,
        camera_id="CAM-03-OBLIQUE-RIGHT",
        camera_notes="Oblique-right isometric 45°, height 1.60 m, 35mm",
        camera=(
            "oblique-right isometric view (45 degrees to the right). Keep the camera "
            "height (approx. 1.60 m) and the lens (35mm)."
        ),
        goal="showing the right side and the depth of the stand",
        view="oblique-right isometric view",
    ),
    4: _camera_phase(
        4,
        camera_id="CAM-04-EYE-LEVEL",
        camera_notes="Aisle eye-level, 1.55 m, 28–35mm, shallow DOF",
        camera=(
            "eye-level view from the aisle, as if a visitor were looking at the stand. "
            "Camera height: 1.55 m. Lens: 28-35mm with a shallow depth of field (DOF)."
        ),
        goal="creating an immersive view from the aisle",
        view="eye-level view",
    ),
}


def phase_for_artifact_count(count: int) -> int:
    """Derive the current phase from the number of generated images.

    Args:
        count: Number of artifacts generated so far (0-4)

    Returns:
        Phase number; ``TERMINAL_PHASE`` once all four images exist

    Raises:
        PhaseError: If count is outside 0-4
    """
    if count < 0 or count > PHASE_COUNT:
        raise PhaseError(f"Artifact count must be 0-{PHASE_COUNT}, got {count}")
    return count + 1


def is_terminal(phase: int) -> bool:
    """Check whether a phase is the final "all done" state."""
    return phase > PHASE_COUNT


def get_phase(number: int) -> PhaseSpec:
    """Look up the spec for a generation phase.

    Raises:
        PhaseError: If the number is not a generation phase (1-4)
    """
    try:
        return PHASES[number]
    except KeyError:
        raise PhaseError(f"No generation phase {number}; phases are 1-{PHASE_COUNT}") from None
