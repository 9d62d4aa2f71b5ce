"""Phase controller - the state machine behind the wizard.

The controller owns the ordered list of generated artifacts and the inputs
for the current phase. The phase itself is derived from the artifact count,
so the only state that changes on a successful request is the artifact list.

States
------
::

    AwaitingInput(1) --submit--> Generating(1) --success--> AwaitingInput(2)
    AwaitingInput(n) --submit--> Generating(n) --success--> AwaitingInput(n+1)
    AwaitingInput(4) --submit--> Generating(4) --success--> Complete
    Generating(n)    --failure--> AwaitingInput(n) with ``error`` set
    any state        --reset----> AwaitingInput(1)

Only one request may be in flight. A reset does not wait for it: each
dispatch captures the current ``epoch`` and the result is applied only if the
epoch is unchanged when it arrives. ``reset()`` bumps the epoch, so a
completion that lands after a reset is dropped.
"""

import logging

from .exceptions import GenerationInProgressError, PhaseError, ValidationError
from .gemini_client import ImageGenerationClient, build_request
from .models import (
    Failure,
    FailureKind,
    GenerationArtifact,
    InputBundle,
    InputFile,
    InputSlot,
    RequestOutcome,
)
from .phases import is_terminal, phase_for_artifact_count
from .validation import validate_phase_inputs, validate_upload

logger = logging.getLogger(__name__)


class PhaseController:
    """Drive the four generation phases for one user session.

    Attributes
    ----------
    artifacts : list[GenerationArtifact]
        Generated images in phase order; grows by one per successful phase
    inputs : InputBundle
        Files collected for the current phase
    is_loading : bool
        True while a request is in flight
    error : str | None
        Message from the last rejected or failed submit
    error_kind : FailureKind | None
        Kind of the last failure, alongside ``error``
    epoch : int
        Incremented on every reset; results from an older epoch are dropped
    """

    def __init__(self, client: ImageGenerationClient):
        self._client = client
        self.artifacts: list[GenerationArtifact] = []
        self.inputs = InputBundle()
        self.is_loading = False
        self.error: str | None = None
        self.error_kind: FailureKind | None = None
        self.epoch = 0

    @property
    def phase(self) -> int:
        return phase_for_artifact_count(len(self.artifacts))

    @property
    def is_complete(self) -> bool:
        return is_terminal(self.phase)

    @property
    def has_started(self) -> bool:
        return bool(self.artifacts) or self.is_loading

    @property
    def latest_artifact(self) -> GenerationArtifact | None:
        return self.artifacts[-1] if self.artifacts else None

    def set_input(self, slot: InputSlot, file: InputFile | None) -> None:
        """Store (or clear) one of the current phase's inputs.

        Args:
            slot: Which input to set
            file: Uploaded file, or None to clear the slot

        Raises:
            ValidationError: If the file type is not accepted for the slot
        """
        if file is not None:
            validate_upload(slot, file)
            logger.info(f"Stored {slot.value} input: {file.name} ({file.mime_type}, {file.size} bytes)")
        self.inputs.set(slot, file)

    async def submit(self) -> RequestOutcome | None:
        """Validate inputs and request the current phase's image.

        A missing required input is rejected without calling the client.
        On success the artifact is appended and the reference input cleared;
        on failure the artifacts are unchanged and ``error`` holds the reason.

        Returns:
            The outcome that was applied, or None if a reset happened while
            the request was in flight and the result was discarded

        Raises:
            PhaseError: If all phases are already complete
            GenerationInProgressError: If a request is already in flight
        """
        if self.is_complete:
            raise PhaseError("All phases are complete. Start a new briefing to generate again.")
        if self.is_loading:
            raise GenerationInProgressError("A generation request is already in progress.")

        phase = self.phase
        try:
            validate_phase_inputs(phase, self.inputs)
        except ValidationError as e:
            logger.warning(f"Phase {phase} rejected: {e}")
            self.error = str(e)
            self.error_kind = FailureKind.VALIDATION
            return Failure(str(e), kind=FailureKind.VALIDATION)

        request = build_request(phase, self.inputs)
        epoch = self.epoch
        self.is_loading = True
        self.error = None
        self.error_kind = None
        logger.info(f"Dispatching phase {phase} (epoch {epoch})")

        try:
            outcome = await self._client.generate(request)
        finally:
            if epoch == self.epoch:
                self.is_loading = False

        if epoch != self.epoch:
            logger.warning(f"Discarding phase {phase} result from epoch {epoch}: session was reset")
            return None

        if outcome.ok:
            self.artifacts.append(outcome.artifact)
            self.inputs.clear_reference()
            logger.info(f"Phase {phase} complete; now at phase {self.phase}")
        else:
            self.error = outcome.message
            self.error_kind = outcome.kind
        return outcome

    def reset(self) -> None:
        """Return to phase 1, dropping artifacts, inputs and any in-flight result."""
        self.epoch += 1
        self.artifacts = []
        self.inputs.clear()
        self.error = None
        self.error_kind = None
        self.is_loading = False
        logger.info(f"Session reset (epoch {self.epoch})")

    def __repr__(self) -> str:
        return (
            f"PhaseController(phase={self.phase}, artifacts={len(self.artifacts)}, "
            f"loading={self.is_loading}, epoch={self.epoch})"
        )
