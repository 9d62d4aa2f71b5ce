"""Stand IA - multi-angle exhibition stand renders from a briefing PDF."""

__version__ = "0.1.0"

from standia.core.config import StandiaConfig, config
from standia.core.controller import PhaseController
from standia.core.phases import PHASES, phase_for_artifact_count

__all__ = [
    "PHASES",
    "PhaseController",
    "StandiaConfig",
    "config",
    "phase_for_artifact_count",
]
