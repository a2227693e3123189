"""Gradio UI application for Fusion Studio"""

import logging
from functools import partial
from typing import Optional, Tuple

import gradio as gr

from ..core import GeminiMediaGenerator, Pose
from ..core.models import ActionResult
from ..config import get_settings
from ..utils import save_media, cleanup_temp_files
from .components import ImageUpload
from .controllers import FusionController, GenerationController, PoseController, VideoController

logger = logging.getLogger(__name__)

POSE_CHOICES = [(pose.value.capitalize(), pose.value) for pose in Pose]


def present_result(
    controller: GenerationController,
    outcome: ActionResult,
    prefix: str
) -> Tuple[GenerationController, str, str]:
    """
    Turn an action result into UI outputs

    Failures are raised as gr.Error so Gradio shows a dismissible toast;
    successes are written to a temp file for display and download.
    """
    if controller.result_path:
        cleanup_temp_files([controller.result_path])
        controller.result_path = None

    if not outcome.success:
        raise gr.Error(outcome.error)

    controller.result_path = save_media(outcome.data, prefix=prefix)
    return controller, controller.result_path, "✅ Done"


def on_fuse(
    generator: GeminiMediaGenerator,
    controller: FusionController,
    person_image: Optional[str],
    product_image: Optional[str],
    background_image: Optional[str]
):
    """Handle image fusion"""
    controller.person_image = person_image
    controller.product_image = product_image
    controller.background_image = background_image

    outcome = controller.generate(generator)
    return present_result(controller, outcome, "fused")


def on_generate_pose(
    generator: GeminiMediaGenerator,
    controller: PoseController,
    model_image: Optional[str],
    clothing_image: Optional[str],
    background_image: Optional[str],
    pose: str
):
    """Handle pose-based image generation"""
    controller.model_image = model_image
    controller.clothing_image = clothing_image
    controller.background_image = background_image
    controller.pose = pose

    outcome = controller.generate(generator)
    return present_result(controller, outcome, "pose")


def on_generate_video(
    generator: GeminiMediaGenerator,
    controller: VideoController,
    source_image: Optional[str],
    prompt: str
):
    """Handle video generation"""
    controller.source_image = source_image
    controller.prompt = prompt or ""

    outcome = controller.generate(generator)
    return present_result(controller, outcome, "video")


def release_result(controller: GenerationController):
    """Remove a session's result file when the session ends"""
    if controller is not None and controller.result_path:
        cleanup_temp_files([controller.result_path])
        controller.result_path = None


def _begin():
    """Disable the trigger and clear the previous result while in flight"""
    return gr.update(interactive=False), None, ""


def _bind(handler, generator):
    """Bind the generator so Gradio only sees the UI inputs"""
    bound = partial(handler, generator)
    bound.__name__ = handler.__name__
    return bound


def _finish():
    return gr.update(interactive=True)


def _wire_generate(button, handler, inputs, result, status):
    button.click(
        fn=_begin,
        outputs=[button, result, status],
    ).then(
        fn=handler,
        inputs=inputs,
        outputs=[inputs[0], result, status],
    ).then(
        fn=_finish,
        outputs=[button],
    )


def create_app(generator: Optional[GeminiMediaGenerator] = None):
    """Create and configure the Gradio application"""

    # Initialize components
    if generator is None:
        generator = GeminiMediaGenerator()

    with gr.Blocks(
        title="Fusion Studio",
        theme=gr.themes.Soft(),
    ) as app:

        # Header
        gr.Markdown("""
        # 🎨 Fusion Studio
        ### Image fusion, pose-based image generation and image-to-video with the Gemini API

        **Features:**
        - 🧥 Put a product onto a person
        - 🧍 Dress a model and place them in a scene and pose
        - 🎬 Turn a still image into a short video
        """)

        with gr.Tabs():
            with gr.Tab("Image Fusion"):
                fusion_state = gr.State(FusionController(), delete_callback=release_result)
                with gr.Row():
                    with gr.Column(scale=1):
                        with gr.Row():
                            person = ImageUpload("Person").render()
                            product = ImageUpload("Product").render()
                            background = ImageUpload("Background (optional)").render()
                        fuse_btn = gr.Button("🎨 Fuse Images", variant="primary")
                    with gr.Column(scale=1):
                        fused_image = gr.Image(
                            label="Fused Image",
                            type="filepath",
                            interactive=False,
                            show_download_button=True,
                        )
                fusion_status = gr.Markdown("")

                _wire_generate(
                    fuse_btn,
                    _bind(on_fuse, generator),
                    [fusion_state, person, product, background],
                    fused_image,
                    fusion_status,
                )

            with gr.Tab("Pose Generation"):
                pose_state = gr.State(PoseController(), delete_callback=release_result)
                with gr.Row():
                    with gr.Column(scale=1):
                        with gr.Row():
                            model = ImageUpload("Model").render()
                            clothing = ImageUpload("Clothing").render()
                            pose_background = ImageUpload("Background").render()
                        pose = gr.Dropdown(
                            choices=POSE_CHOICES,
                            value=Pose.STANDING.value,
                            label="Pose",
                        )
                        pose_btn = gr.Button("✨ Generate Image", variant="primary")
                    with gr.Column(scale=1):
                        pose_image = gr.Image(
                            label="Generated Image",
                            type="filepath",
                            interactive=False,
                            show_download_button=True,
                        )
                pose_status = gr.Markdown("")

                _wire_generate(
                    pose_btn,
                    _bind(on_generate_pose, generator),
                    [pose_state, model, clothing, pose_background, pose],
                    pose_image,
                    pose_status,
                )

            with gr.Tab("Video Generation"):
                video_state = gr.State(VideoController(), delete_callback=release_result)
                with gr.Row():
                    with gr.Column(scale=1):
                        source = ImageUpload("Source Image").render()
                        video_prompt = gr.Textbox(
                            label="Prompt (optional)",
                            placeholder="Describe the motion...",
                            lines=3,
                            max_lines=5,
                        )
                        video_btn = gr.Button("🎬 Generate Video", variant="primary")
                    with gr.Column(scale=1):
                        video = gr.Video(
                            label="Generated Video",
                            interactive=False,
                        )
                video_status = gr.Markdown("")

                _wire_generate(
                    video_btn,
                    _bind(on_generate_video, generator),
                    [video_state, source, video_prompt],
                    video,
                    video_status,
                )

    return app


def launch_app():
    """Launch the Gradio application"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings.validate()

    app = create_app()
    logger.info(f"Starting Fusion Studio on {settings.host}:{settings.port}")
    app.launch(
        server_name=settings.host,
        server_port=settings.port,
        share=settings.share,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    launch_app()
