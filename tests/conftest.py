"""Shared pytest fixtures for Stand IA tests."""

import asyncio
import io
import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from google.genai import types
from PIL import Image

from standia.core.config import StandiaConfig
from standia.core.controller import PhaseController
from standia.core.models import (
    Failure,
    FailureKind,
    GenerationArtifact,
    GenerationRequest,
    InputFile,
    RequestOutcome,
    Success,
)
from standia.ui.models import UIState


def make_png_bytes(color: str = "red", size: tuple[int, int] = (32, 18)) -> bytes:
    """Encode a small solid-colour PNG."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def image_response(data: bytes = b"AAA", mime_type: str = "image/png") -> types.GenerateContentResponse:
    """Build an API response carrying one inline image."""
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))],
                ),
                finish_reason=types.FinishReason.STOP,
            )
        ]
    )


class FakeImageClient:
    """In-memory stand-in for GeminiImageClient.

    Returns queued outcomes in order (a default Success once the queue is
    empty) and records every request it receives.
    """

    def __init__(self, outcomes: list[RequestOutcome] | None = None):
        self.outcomes = list(outcomes or [])
        self.requests: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> RequestOutcome:
        self.requests.append(request)
        if self.outcomes:
            return self.outcomes.pop(0)
        return Success(GenerationArtifact(data=make_png_bytes(), phase=request.phase))

    @property
    def call_count(self) -> int:
        return len(self.requests)


class BlockingImageClient(FakeImageClient):
    """Fake client whose requests wait until ``release`` is set."""

    def __init__(self, outcomes: list[RequestOutcome] | None = None):
        super().__init__(outcomes)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def generate(self, request: GenerationRequest) -> RequestOutcome:
        self.started.set()
        await self.release.wait()
        return await super().generate(request)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(monkeypatch) -> StandiaConfig:
    """Create a test configuration with a dummy API key and no .env file."""
    for name in ("STANDIA_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return StandiaConfig(
        _env_file=None,
        gemini_api_key="test-key",
        model_id="gemini-2.5-flash-image",
        request_timeout_ms=10_000,
    )


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes of a real PNG image."""
    return make_png_bytes()


@pytest.fixture
def briefing_file() -> InputFile:
    """A minimal briefing PDF."""
    return InputFile(name="briefing.pdf", mime_type="application/pdf", data=b"%PDF-1.4 stand briefing")


@pytest.fixture
def logo_file(png_bytes) -> InputFile:
    """A PNG company logo."""
    return InputFile(name="logo.png", mime_type="image/png", data=png_bytes)


@pytest.fixture
def reference_file(png_bytes) -> InputFile:
    """A PNG reference image, as re-uploaded by the user."""
    return InputFile(name="stand_ia_phase_1.png", mime_type="image/png", data=png_bytes)


@pytest.fixture
def fake_client() -> FakeImageClient:
    """Fake client that succeeds with a real PNG for every request."""
    return FakeImageClient()


@pytest.fixture
def controller(fake_client) -> PhaseController:
    """Phase controller driven by the fake client."""
    return PhaseController(fake_client)


@pytest.fixture
def ui_state(controller) -> UIState:
    """UI state with an initialized controller."""
    return UIState(controller=controller)


@pytest.fixture
def failure_outcome() -> Failure:
    return Failure("Generation stopped. Reason: SAFETY.", kind=FailureKind.STOPPED)
