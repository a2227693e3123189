"""Gemini API media generation core functionality"""

import base64
import logging
import time
from typing import Any, Iterator, List, Optional

from google import genai
from google.genai import types

from ..config import get_settings
from ..utils.image_utils import parse_data_uri, to_data_uri
from .models import GenerationError, Media
from .prompts import PromptPart

logger = logging.getLogger(__name__)

DEFAULT_VIDEO_MIME_TYPE = "video/mp4"


class GeminiMediaGenerator:
    """Handles image and video generation using the Gemini API"""

    def __init__(self, api_key: Optional[str] = None, client: Optional[Any] = None):
        """
        Initialize the generator with API credentials

        Args:
            api_key: Gemini API key, defaults to GEMINI_API_KEY
            client: Preconfigured genai client (used instead of creating one)
        """
        self.settings = get_settings()

        if client is None:
            api_key = api_key or self.settings.gemini_api_key
            if not api_key:
                raise ValueError("API key is required")
            client = genai.Client(api_key=api_key)

        self.client = client
        self.image_model = self.settings.image_model_name
        self.video_model = self.settings.video_model_name

    def generate_image(self, prompt_parts: List[PromptPart]) -> Optional[str]:
        """
        Generate a single image from interleaved text and image parts

        Args:
            prompt_parts: Strings and Media references in reading order

        Returns:
            Data URI of the first image in the response, or None
        """
        contents = [types.Content(role="user", parts=self._build_parts(prompt_parts))]
        config = types.GenerateContentConfig(
            response_modalities=self.settings.response_modalities,
        )

        logger.info(f"Requesting image from {self.image_model}")
        response = self.client.models.generate_content(
            model=self.image_model,
            contents=contents,
            config=config,
        )

        for part in self._iter_parts(response):
            inline_data = getattr(part, "inline_data", None)
            if inline_data is None or not inline_data.data:
                if getattr(part, "text", None):
                    logger.debug(f"Model text response: {part.text}")
                continue

            data = inline_data.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            mime_type = inline_data.mime_type or "image/png"
            logger.debug(f"Received {mime_type} image ({len(data)} bytes)")
            return to_data_uri(data, mime_type)

        logger.warning("Image model returned no inline image data")
        return None

    def generate_video(self, image_data_uri: str, prompt: str) -> Optional[str]:
        """
        Generate a short video from a source image

        Submits one long-running operation and waits for it to finish.

        Args:
            image_data_uri: Source image as a data URI
            prompt: Instruction describing the motion

        Returns:
            Data URI of the generated video, or None
        """
        mime_type, image_bytes = parse_data_uri(image_data_uri)

        logger.info(f"Requesting video from {self.video_model}")
        operation = self.client.models.generate_videos(
            model=self.video_model,
            prompt=prompt,
            image=types.Image(image_bytes=image_bytes, mime_type=mime_type),
            config=types.GenerateVideosConfig(number_of_videos=1),
        )

        while not operation.done:
            logger.debug(f"Video operation {getattr(operation, 'name', '')} still running")
            time.sleep(self.settings.video_poll_interval_seconds)
            operation = self.client.operations.get(operation)

        if operation.error:
            message = operation.error.get("message") if isinstance(operation.error, dict) else str(operation.error)
            raise GenerationError(message or "Video generation operation failed")

        response = operation.response or getattr(operation, "result", None)
        videos = getattr(response, "generated_videos", None) if response else None
        if not videos or videos[0].video is None:
            logger.warning("Video model returned no videos")
            return None

        video = videos[0].video
        video_bytes = video.video_bytes
        if not video_bytes:
            video_bytes = self.client.files.download(file=video)
        if not video_bytes:
            return None

        mime_type = video.mime_type or DEFAULT_VIDEO_MIME_TYPE
        logger.debug(f"Received {mime_type} video ({len(video_bytes)} bytes)")
        return to_data_uri(video_bytes, mime_type)

    def _build_parts(self, prompt_parts: List[PromptPart]) -> List[types.Part]:
        """Convert prompt parts to API parts"""
        parts = []
        for prompt_part in prompt_parts:
            if isinstance(prompt_part, Media):
                mime_type, data = parse_data_uri(prompt_part.url)
                parts.append(types.Part.from_bytes(data=data, mime_type=mime_type))
            else:
                parts.append(types.Part.from_text(text=prompt_part))
        return parts

    def _iter_parts(self, response) -> Iterator[Any]:
        """Yield every content part of every candidate"""
        for candidate in response.candidates or []:
            if candidate.content is None or candidate.content.parts is None:
                continue
            yield from candidate.content.parts
