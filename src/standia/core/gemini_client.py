"""Request/response adapter for the Gemini image model.

This module is the only place that knows the shape of the Gemini API.
It has three parts:

- :func:`build_request` turns a phase number and the collected inputs into
  a system instruction plus ordered content parts.
- :func:`interpret_response` reduces an API response to a single
  :class:`Success` or a :class:`Failure` with a human-readable reason.
- :class:`GeminiImageClient` performs the call and folds every transport
  error into a :class:`Failure`, so callers never need a try/except.

Failure Messages
----------------
When no image comes back, the reason is reported in this order:

1. ``Generation stopped. Reason: <finish_reason>.`` when the candidate
   finished with anything other than ``STOP``
2. ``Generation blocked. Reason: <block_reason>.`` when the prompt was blocked
3. A generic "no image data" message otherwise

Safety ratings above ``LOW`` are appended as
``High-risk categories detected: HARASSMENT (MEDIUM), ...``.
"""

import base64
import logging
from enum import Enum
from typing import Any, Protocol

from google import genai
from google.genai import types

from .config import StandiaConfig
from .models import (
    Failure,
    FailureKind,
    GenerationArtifact,
    GenerationRequest,
    InputBundle,
    InputFile,
    RequestOutcome,
    Success,
)
from .phases import get_phase

logger = logging.getLogger(__name__)

NO_IMAGE_MESSAGE = "Invalid response from AI: No image data was generated."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during the API call."

_NORMAL_FINISH_REASON = "STOP"
_ACCEPTABLE_PROBABILITIES = frozenset({"NEGLIGIBLE", "LOW"})
_HARM_CATEGORY_PREFIX = "HARM_CATEGORY_"


class ImageGenerationClient(Protocol):
    """Anything that can turn a request into an outcome."""

    async def generate(self, request: GenerationRequest) -> RequestOutcome: ...


def file_to_part(file: InputFile) -> types.Part:
    """Package an uploaded file as an inline binary part."""
    return types.Part.from_bytes(data=file.data, mime_type=file.mime_type)


def build_request(phase: int, bundle: InputBundle) -> GenerationRequest:
    """Build the request for a phase.

    Binary parts come first, in the order the phase table lists its input
    slots; the phase's user instruction is always the last part. Optional
    slots that are empty are skipped.

    Args:
        phase: Phase number (1-4)
        bundle: Inputs collected for the phase

    Returns:
        GenerationRequest ready to send

    Raises:
        PhaseError: If the phase is not a generation phase
    """
    spec = get_phase(phase)
    parts = [file_to_part(f) for f in (bundle.get(s) for s in spec.input_slots) if f is not None]
    parts.append(types.Part.from_text(text=spec.user_instruction))
    return GenerationRequest(
        phase=phase,
        system_instruction=spec.system_instruction,
        parts=parts,
    )


def _enum_text(value: Any) -> str:
    # google-genai returns enums for known values and plain strings otherwise
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _find_inline_image(candidate: Any) -> types.Blob | None:
    content = getattr(candidate, "content", None)
    for part in getattr(content, "parts", None) or []:
        inline_data = getattr(part, "inline_data", None)
        if inline_data is not None and inline_data.data:
            return inline_data
    return None


def _high_risk_categories(safety_ratings: list[Any]) -> list[str]:
    offending = []
    for rating in safety_ratings:
        if rating.probability is None:
            continue
        probability = _enum_text(rating.probability)
        if probability in _ACCEPTABLE_PROBABILITIES:
            continue
        category = _enum_text(rating.category).removeprefix(_HARM_CATEGORY_PREFIX)
        offending.append(f"{category} ({probability})")
    return offending


def interpret_response(response: Any, phase: int = 0) -> RequestOutcome:
    """Reduce a ``generate_content`` response to a single outcome.

    Args:
        response: ``types.GenerateContentResponse`` (or an object of that shape)
        phase: Phase the response belongs to, recorded on the artifact

    Returns:
        Success with the first inline image found, or a Failure explaining
        why no image was produced
    """
    if response is None:
        return Failure(NO_IMAGE_MESSAGE, kind=FailureKind.EMPTY)

    candidates = getattr(response, "candidates", None) or []
    for candidate in candidates:
        blob = _find_inline_image(candidate)
        if blob is not None:
            data = blob.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            return Success(
                GenerationArtifact(
                    data=data,
                    mime_type=blob.mime_type or "image/png",
                    phase=phase,
                )
            )

    candidate = candidates[0] if candidates else None
    prompt_feedback = getattr(response, "prompt_feedback", None)
    finish_reason = getattr(candidate, "finish_reason", None)
    block_reason = getattr(prompt_feedback, "block_reason", None)

    message = NO_IMAGE_MESSAGE
    kind = FailureKind.EMPTY
    if finish_reason is not None and _enum_text(finish_reason) != _NORMAL_FINISH_REASON:
        message = f"Generation stopped. Reason: {_enum_text(finish_reason)}."
        kind = FailureKind.STOPPED
    elif block_reason is not None:
        message = f"Generation blocked. Reason: {_enum_text(block_reason)}."
        kind = FailureKind.BLOCKED

    safety_ratings = getattr(candidate, "safety_ratings", None) or getattr(
        prompt_feedback, "safety_ratings", None
    )
    if safety_ratings:
        offending = _high_risk_categories(safety_ratings)
        if offending:
            message += (
                f" High-risk categories detected: {', '.join(offending)}."
                " Please adjust your inputs."
            )

    return Failure(message, kind=kind)


class GeminiImageClient:
    """Gemini image generation client.

    Wraps ``google.genai.Client`` and exposes one coroutine,
    :meth:`generate`, which always returns an outcome.

    Attributes
    ----------
    model_id : str
        Gemini model used for every request
    """

    def __init__(self, config: StandiaConfig, client: genai.Client | None = None):
        """Create the client.

        Args:
            config: Application configuration
            client: Pre-built ``genai.Client`` (tests); built from config if None

        Raises:
            MissingCredentialsError: If no API key is configured and no client is given
        """
        self.model_id = config.model_id
        if client is None:
            client = genai.Client(
                api_key=config.require_api_key(),
                http_options=types.HttpOptions(timeout=config.request_timeout_ms),
            )
        self._client = client

    def _build_config(self, request: GenerationRequest) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=request.system_instruction,
            response_modalities=["IMAGE"],
        )

    async def generate(self, request: GenerationRequest) -> RequestOutcome:
        """Send one request and interpret the response.

        Args:
            request: Request built by :func:`build_request`

        Returns:
            Success or Failure; never raises for API or network errors
        """
        logger.info(
            f"Requesting phase {request.phase} image from {self.model_id} "
            f"({len(request.parts)} parts)"
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=self.model_id,
                contents=request.parts,
                config=self._build_config(request),
            )
            outcome = interpret_response(response, phase=request.phase)
        except Exception as e:
            logger.error(f"Error calling Gemini API: {e}", exc_info=True)
            return Failure(str(e) or UNEXPECTED_ERROR_MESSAGE, kind=FailureKind.TRANSPORT)

        if outcome.ok:
            logger.info(f"Phase {request.phase} image received ({len(outcome.artifact.data)} bytes)")
        else:
            logger.warning(f"Phase {request.phase} produced no image: {outcome.message}")
        return outcome
