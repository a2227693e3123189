"""Per-session view state for each generation feature"""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.actions import fuse_images_action, generate_image_action, generate_video_action
from ..core.generator import GeminiMediaGenerator
from ..core.models import (
    ActionResult,
    FuseImagesRequest,
    GenerateImageRequest,
    GenerateVideoRequest,
    Pose,
)


class GenerationController(ABC):
    """
    Holds the inputs, in-flight flag and result of one feature

    Instances live in gr.State, so every browser session gets its own.
    Subclasses implement build_request() and run_action().
    """

    def __init__(self):
        self.in_flight: bool = False
        self.result: Optional[str] = None
        # File the current result was written to for display/download
        self.result_path: Optional[str] = None

    @abstractmethod
    def build_request(self):
        """Build a fresh request from the current slots"""

    @abstractmethod
    def run_action(self, request, generator: GeminiMediaGenerator) -> ActionResult:
        """Run the feature's orchestration action"""

    def generate(self, generator: GeminiMediaGenerator) -> ActionResult:
        """
        Run the feature's action once and record the outcome

        The previous result is cleared up front. Overlapping calls are not
        serialised; whichever completes last owns the result slot.

        Args:
            generator: Generation service client

        Returns:
            The action's result
        """
        request = self.build_request()
        self.in_flight = True
        self.result = None
        try:
            outcome = self.run_action(request, generator)
        finally:
            self.in_flight = False

        if outcome.success:
            self.result = outcome.data
        return outcome


class FusionController(GenerationController):
    """Person + product (+ optional background) fusion"""

    def __init__(self):
        super().__init__()
        self.person_image: Optional[str] = None
        self.product_image: Optional[str] = None
        self.background_image: Optional[str] = None

    def build_request(self) -> FuseImagesRequest:
        return FuseImagesRequest(
            person_image_data_uri=self.person_image,
            product_image_data_uri=self.product_image,
            background_image_data_uri=self.background_image,
        )

    def run_action(self, request, generator: GeminiMediaGenerator) -> ActionResult:
        return fuse_images_action(request, generator)


class PoseController(GenerationController):
    """Model + clothing + background in a selected pose"""

    def __init__(self):
        super().__init__()
        self.model_image: Optional[str] = None
        self.clothing_image: Optional[str] = None
        self.background_image: Optional[str] = None
        self.pose: str = Pose.STANDING.value

    def build_request(self) -> GenerateImageRequest:
        return GenerateImageRequest(
            model=self.model_image,
            clothing=self.clothing_image,
            background=self.background_image,
            pose=self.pose,
        )

    def run_action(self, request, generator: GeminiMediaGenerator) -> ActionResult:
        return generate_image_action(request, generator)


class VideoController(GenerationController):
    """Source image + optional prompt to video"""

    def __init__(self):
        super().__init__()
        self.source_image: Optional[str] = None
        self.prompt: str = ""

    def build_request(self) -> GenerateVideoRequest:
        return GenerateVideoRequest(
            image_data_uri=self.source_image,
            prompt=self.prompt,
        )

    def run_action(self, request, generator: GeminiMediaGenerator) -> ActionResult:
        return generate_video_action(request, generator)
