"""Prompt templates sent to the generation models"""

from typing import List, Optional, Union

from .models import FuseImagesRequest, GenerateImageRequest, Media, Pose

PromptPart = Union[str, Media]

DEFAULT_VIDEO_PROMPT = (
    "Animate this image into a short, smooth video clip. "
    "Keep the subject, clothing and scene consistent with the image and add natural motion."
)


def build_fusion_prompt(request: FuseImagesRequest) -> List[PromptPart]:
    """
    Build the multimodal prompt for image fusion

    Args:
        request: Fusion request with person, product and optional background

    Returns:
        Text and media parts in the order the model should read them
    """
    if request.background_image_data_uri:
        scene = "- The final scene should use the background from the background image."
    else:
        scene = "- Keep the original background from the person image."

    parts: List[PromptPart] = [
        "You are an expert image editor. Create a photorealistic image based on the following inputs.\n\n"
        "- The main subject is the person from the person image.\n"
        "- The subject should be wearing or holding the product from the product image.\n"
        f"{scene}\n"
        "- Preserve the person's face, body shape and the product's details.\n\n"
        "Person Image:",
        Media(url=request.person_image_data_uri),
        "Product Image:",
        Media(url=request.product_image_data_uri),
    ]

    if request.background_image_data_uri:
        parts.extend([
            "Background Image:",
            Media(url=request.background_image_data_uri),
        ])

    parts.append("Generate a new image that seamlessly combines these elements.")
    return parts


def build_pose_prompt(request: GenerateImageRequest) -> List[PromptPart]:
    """Build the multimodal prompt for pose-based image generation"""
    return [
        "You are an expert image editor. Create a photorealistic image based on the following inputs.\n\n"
        "- The main subject is the person from the model image.\n"
        "- The subject should be wearing the clothes from the clothing image.\n"
        "- The final scene should use the background from the background image.\n"
        f"- The model's pose should be '{Pose(request.pose).value}'.\n\n"
        "Model Image:",
        Media(url=request.model),
        "Clothing Image:",
        Media(url=request.clothing),
        "Background Image:",
        Media(url=request.background),
        "Generate a new image that seamlessly combines these elements.",
    ]


def build_video_prompt(prompt_text: Optional[str]) -> str:
    """Use the user's prompt, or a default animation instruction when empty"""
    if prompt_text and prompt_text.strip():
        return prompt_text.strip()
    return DEFAULT_VIDEO_PROMPT
