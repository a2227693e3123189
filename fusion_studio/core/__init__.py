"""Core functionality for Gemini media generation"""

from .generator import GeminiMediaGenerator
from .actions import fuse_images_action, generate_image_action, generate_video_action
from .models import (
    ActionResult,
    FuseImagesRequest,
    GenerateImageRequest,
    GenerateVideoRequest,
    GenerationError,
    Pose,
)

__all__ = [
    "GeminiMediaGenerator",
    "fuse_images_action",
    "generate_image_action",
    "generate_video_action",
    "ActionResult",
    "FuseImagesRequest",
    "GenerateImageRequest",
    "GenerateVideoRequest",
    "GenerationError",
    "Pose",
]
