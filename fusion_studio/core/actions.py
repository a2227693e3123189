"""
Orchestration actions called by the UI

Each action validates its request, makes at most one call to the
generation service and always returns an ActionResult; nothing raises
past this layer.
"""

import logging

from .flows import generate_fused_image, generate_pose_image, generate_video
from .generator import GeminiMediaGenerator
from .models import (
    UNKNOWN_ERROR_MESSAGE,
    ActionResult,
    FuseImagesRequest,
    GenerateImageRequest,
    GenerateVideoRequest,
)

logger = logging.getLogger(__name__)


def _error_message(error: Exception) -> str:
    return str(error) or UNKNOWN_ERROR_MESSAGE


def fuse_images_action(request: FuseImagesRequest, generator: GeminiMediaGenerator) -> ActionResult:
    """Fuse a person and a product image"""
    missing = request.missing_field_error()
    if missing:
        return ActionResult.fail(missing)

    try:
        result = generate_fused_image(request, generator)
    except Exception as e:
        logger.error(f"Image fusion failed: {e}", exc_info=True)
        return ActionResult.fail(_error_message(e))

    return ActionResult.ok(result.fused_image_data_uri)


def generate_image_action(request: GenerateImageRequest, generator: GeminiMediaGenerator) -> ActionResult:
    """Generate a model/clothing/background image in the requested pose"""
    missing = request.missing_field_error()
    if missing:
        return ActionResult.fail(missing)

    try:
        result = generate_pose_image(request, generator)
    except Exception as e:
        logger.error(f"Image generation failed: {e}", exc_info=True)
        return ActionResult.fail(_error_message(e))

    return ActionResult.ok(result.url)


def generate_video_action(request: GenerateVideoRequest, generator: GeminiMediaGenerator) -> ActionResult:
    """Generate a short video from a source image and optional prompt"""
    missing = request.missing_field_error()
    if missing:
        return ActionResult.fail(missing)

    try:
        result = generate_video(request, generator)
    except Exception as e:
        logger.error(f"Video generation failed: {e}", exc_info=True)
        return ActionResult.fail(_error_message(e))

    return ActionResult.ok(result.video_data_uri)
