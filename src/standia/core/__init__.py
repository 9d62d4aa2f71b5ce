"""Core domain for Stand IA.

This package holds everything that does not depend on the UI:

- config: Pydantic Settings configuration
- models: input files, artifacts and request outcomes
- phases: the phase table (camera, inputs and instructions per phase)
- validation: local input checks
- gemini_client: request building, response interpretation and the API client
- controller: the phase state machine
"""

from .config import StandiaConfig, config
from .controller import PhaseController
from .exceptions import (
    ConfigurationError,
    GenerationInProgressError,
    MissingCredentialsError,
    PhaseError,
    StandiaError,
    ValidationError,
)
from .gemini_client import GeminiImageClient, build_request, interpret_response
from .models import (
    Failure,
    FailureKind,
    GenerationArtifact,
    GenerationRequest,
    InputBundle,
    InputFile,
    InputSlot,
    RequestOutcome,
    Success,
)
from .phases import PHASE_COUNT, PHASES, TERMINAL_PHASE, PhaseSpec, get_phase, phase_for_artifact_count

__all__ = [
    # Configuration
    "StandiaConfig",
    "config",
    # Errors
    "ConfigurationError",
    "GenerationInProgressError",
    "MissingCredentialsError",
    "PhaseError",
    "StandiaError",
    "ValidationError",
    # Data model
    "Failure",
    "FailureKind",
    "GenerationArtifact",
    "GenerationRequest",
    "InputBundle",
    "InputFile",
    "InputSlot",
    "RequestOutcome",
    "Success",
    # Phases
    "PHASES",
    "PHASE_COUNT",
    "TERMINAL_PHASE",
    "PhaseSpec",
    "get_phase",
    "phase_for_artifact_count",
    # Workflow
    "GeminiImageClient",
    "PhaseController",
    "build_request",
    "interpret_response",
]
