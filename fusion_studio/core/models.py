"""Request, output and result types shared by flows, actions and the UI"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
IMAGE_GENERATION_FAILED_MESSAGE = "AI failed to generate an image. Please try again."
VIDEO_GENERATION_FAILED_MESSAGE = "AI failed to generate a video. Please try again."


class GenerationError(Exception):
    """The generation service finished without a usable media reference"""


class Pose(str, Enum):
    """Poses the model can be rendered in"""

    STANDING = "standing"
    SITTING = "sitting"
    WALKING = "walking"

    @classmethod
    def values(cls):
        return [pose.value for pose in cls]


INVALID_POSE_MESSAGE = f"Pose must be one of: {', '.join(Pose.values())}."


@dataclass(frozen=True)
class Media:
    """A multimodal content part referencing an image by data URI"""

    url: str


@dataclass(frozen=True)
class FuseImagesRequest:
    """Put the product from one image onto the person from another"""

    person_image_data_uri: Optional[str]
    product_image_data_uri: Optional[str]
    background_image_data_uri: Optional[str] = None

    def missing_field_error(self) -> Optional[str]:
        if not self.person_image_data_uri:
            return "A person image is required."
        if not self.product_image_data_uri:
            return "A product image is required."
        return None


@dataclass(frozen=True)
class GenerateImageRequest:
    """Dress the model in the clothing, place them in the background, in a pose"""

    model: Optional[str]
    clothing: Optional[str]
    background: Optional[str]
    pose: Optional[str]

    def missing_field_error(self) -> Optional[str]:
        if not self.model:
            return "A model image is required."
        if not self.clothing:
            return "A clothing image is required."
        if not self.background:
            return "A background image is required."
        if not self.pose:
            return "A pose is required."
        if self.pose not in Pose.values():
            return INVALID_POSE_MESSAGE
        return None


@dataclass(frozen=True)
class GenerateVideoRequest:
    """Animate a still image, optionally steered by a prompt"""

    image_data_uri: Optional[str]
    prompt: Optional[str] = ""

    def missing_field_error(self) -> Optional[str]:
        if not self.image_data_uri:
            return "A source image is required."
        return None


@dataclass(frozen=True)
class FusedImageOutput:
    fused_image_data_uri: str


@dataclass(frozen=True)
class GeneratedImage:
    url: str


@dataclass(frozen=True)
class GeneratedVideo:
    video_data_uri: str


@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of an orchestration action

    Exactly one of data (on success) or error (on failure) is set.
    """

    success: bool
    data: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: str) -> "ActionResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ActionResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error}
