"""Generation flows: one prompt, one service call, one media reference"""

import logging

from ..utils.image_utils import is_data_uri
from .generator import GeminiMediaGenerator
from .models import (
    IMAGE_GENERATION_FAILED_MESSAGE,
    VIDEO_GENERATION_FAILED_MESSAGE,
    FusedImageOutput,
    FuseImagesRequest,
    GeneratedImage,
    GeneratedVideo,
    GenerateImageRequest,
    GenerateVideoRequest,
    GenerationError,
)
from .prompts import build_fusion_prompt, build_pose_prompt, build_video_prompt

logger = logging.getLogger(__name__)


def generate_fused_image(request: FuseImagesRequest, generator: GeminiMediaGenerator) -> FusedImageOutput:
    """
    Fuse the person and product images, optionally onto a background

    Raises:
        GenerationError: If the model returned no image
    """
    media_url = generator.generate_image(build_fusion_prompt(request))
    if not is_data_uri(media_url):
        raise GenerationError(IMAGE_GENERATION_FAILED_MESSAGE)
    return FusedImageOutput(fused_image_data_uri=media_url)


def generate_pose_image(request: GenerateImageRequest, generator: GeminiMediaGenerator) -> GeneratedImage:
    """
    Render the model wearing the clothing, in the background, in the pose

    Raises:
        GenerationError: If the model returned no image
    """
    media_url = generator.generate_image(build_pose_prompt(request))
    if not is_data_uri(media_url):
        raise GenerationError(IMAGE_GENERATION_FAILED_MESSAGE)
    return GeneratedImage(url=media_url)


def generate_video(request: GenerateVideoRequest, generator: GeminiMediaGenerator) -> GeneratedVideo:
    """
    Animate the source image

    Raises:
        GenerationError: If the model returned no video
    """
    prompt = build_video_prompt(request.prompt)
    logger.debug(f"Video prompt: {prompt}")
    media_url = generator.generate_video(request.image_data_uri, prompt)
    if not is_data_uri(media_url):
        raise GenerationError(VIDEO_GENERATION_FAILED_MESSAGE)
    return GeneratedVideo(video_data_uri=media_url)
