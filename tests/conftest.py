"""Shared pytest fixtures for Fusion Studio tests."""

import base64
import io
from pathlib import Path
from unittest.mock import Mock

import pytest
from PIL import Image

from fusion_studio.config import settings as settings_module
from fusion_studio.core.generator import GeminiMediaGenerator


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path: Path):
    """Give every test fresh settings with a throwaway temp directory."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("TEMP_DIR", str(tmp_path / "temp"))
    monkeypatch.setattr(settings_module, "_settings", None)
    yield settings_module.get_settings()
    monkeypatch.setattr(settings_module, "_settings", None)


@pytest.fixture
def png_bytes() -> bytes:
    """A tiny real PNG image."""
    buffered = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 30, 30)).save(buffered, format="PNG")
    return buffered.getvalue()


@pytest.fixture
def rgba_png_bytes() -> bytes:
    """A PNG with an alpha channel, like a product cut-out."""
    buffered = io.BytesIO()
    Image.new("RGBA", (4, 4), color=(30, 200, 30, 0)).save(buffered, format="PNG")
    return buffered.getvalue()


@pytest.fixture
def png_data_uri(png_bytes: bytes) -> str:
    return "data:image/png;base64," + base64.b64encode(png_bytes).decode()


@pytest.fixture
def mock_generator() -> Mock:
    """Generation service stand-in returning fixed media references.

    Returns:
        Mock with generate_image/generate_video configured
    """
    generator = Mock(spec=GeminiMediaGenerator)
    generator.generate_image.return_value = "data:image/png;base64,QkJC"
    generator.generate_video.return_value = "data:video/mp4;base64,VklE"
    return generator
