"""Unit tests for UI value adapters."""

from types import SimpleNamespace

from PIL import Image

from standia.core.models import GenerationArtifact
from standia.core.phases import PHASES
from standia.ui.adapters import artifact_to_image, artifacts_to_gallery, upload_to_input_file


class TestUploadToInputFile:
    def test_none_is_no_file(self):
        assert upload_to_input_file(None) is None

    def test_empty_string_is_no_file(self):
        assert upload_to_input_file("") is None

    def test_path_string(self, temp_dir):
        path = temp_dir / "briefing.pdf"
        path.write_bytes(b"%PDF-1.7")

        result = upload_to_input_file(str(path))

        assert result.name == "briefing.pdf"
        assert result.mime_type == "application/pdf"
        assert result.data == b"%PDF-1.7"

    def test_file_like_payload(self, temp_dir, png_bytes):
        path = temp_dir / "ref.png"
        path.write_bytes(png_bytes)

        result = upload_to_input_file(SimpleNamespace(path=str(path)))

        assert result.mime_type == "image/png"
        assert result.data == png_bytes


class TestArtifactToImage:
    def test_none(self):
        assert artifact_to_image(None) is None

    def test_decodes_png(self, png_bytes):
        image = artifact_to_image(GenerationArtifact(data=png_bytes))
        assert isinstance(image, Image.Image)

    def test_undecodable_bytes(self):
        assert artifact_to_image(GenerationArtifact(data=b"AAA")) is None


class TestArtifactsToGallery:
    def test_captions_follow_phase_order(self, png_bytes):
        artifacts = [GenerationArtifact(data=png_bytes, phase=n) for n in range(1, 5)]

        gallery = artifacts_to_gallery(artifacts)

        assert [caption for _, caption in gallery] == [PHASES[n].caption for n in range(1, 5)]
        assert all(isinstance(image, Image.Image) for image, _ in gallery)

    def test_skips_undecodable(self, png_bytes):
        artifacts = [GenerationArtifact(data=png_bytes), GenerationArtifact(data=b"AAA")]
        assert len(artifacts_to_gallery(artifacts)) == 1
