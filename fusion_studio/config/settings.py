"""Configuration settings for Fusion Studio"""

import os
from typing import Optional
from dataclasses import dataclass
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
project_root = Path(__file__).parent.parent.parent
env_file = project_root / ".env"
if env_file.exists():
    load_dotenv(env_file)
else:
    # Try loading from current working directory
    load_dotenv()


@dataclass
class Settings:
    """Application settings"""

    # API Configuration
    gemini_api_key: Optional[str] = None
    image_model_name: str = "gemini-2.5-flash-image"
    video_model_name: str = "veo-2.0-generate-001"
    response_modalities: list = None

    # Video operations are long-running; seconds between status checks
    video_poll_interval_seconds: float = 10.0

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 7860
    share: bool = False

    # Logging
    log_level: str = "INFO"

    # Generated media handed to Gradio for display/download
    temp_dir: str = "./temp"

    def __post_init__(self):
        if self.response_modalities is None:
            self.response_modalities = ["TEXT", "IMAGE"]

        # Get settings from environment variables if not set
        if not self.gemini_api_key:
            self.gemini_api_key = os.environ.get("GEMINI_API_KEY")

        # Override with environment variables if they exist
        self.image_model_name = os.environ.get("GEMINI_IMAGE_MODEL", self.image_model_name)
        self.video_model_name = os.environ.get("GEMINI_VIDEO_MODEL", self.video_model_name)
        self.video_poll_interval_seconds = float(
            os.environ.get("VIDEO_POLL_INTERVAL_SECONDS", str(self.video_poll_interval_seconds))
        )
        self.host = os.environ.get("HOST", self.host)
        self.port = int(os.environ.get("PORT", str(self.port)))
        self.share = os.environ.get("SHARE", str(self.share)).lower() == "true"
        self.log_level = os.environ.get("LOG_LEVEL", self.log_level).upper()

        self.temp_dir = os.environ.get("TEMP_DIR", self.temp_dir)

        # Create directories if they don't exist
        os.makedirs(self.temp_dir, exist_ok=True)

    def validate(self) -> bool:
        """Validate settings"""
        if not self.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is not set")
        if self.video_poll_interval_seconds <= 0:
            raise ValueError("VIDEO_POLL_INTERVAL_SECONDS must be positive")
        return True


# Singleton instance
_settings = None


def get_settings() -> Settings:
    """Get application settings singleton"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
