"""UI components for image upload capture"""

import logging
from typing import Optional, Tuple

import gradio as gr

from ..utils.image_utils import file_to_data_uri

logger = logging.getLogger(__name__)


def capture_upload(file_path: Optional[str]) -> Optional[str]:
    """
    Convert an uploaded or dropped file into a data URI

    Args:
        file_path: Path Gradio stored the upload at, None when cleared

    Returns:
        Data URI of the file, or None when there is no file
    """
    if not file_path:
        return None

    data_uri = file_to_data_uri(file_path)
    logger.debug(f"Captured upload {file_path} ({len(data_uri)} chars)")
    return data_uri


def on_upload_change(file_path: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """Return the new data URI and the preview path for an upload change"""
    if not file_path:
        return None, None
    return capture_upload(file_path), file_path


class ImageUpload:
    """
    Upload/drop target that keeps its image as a data URI

    gr.File hands over the user's file untouched; gr.Image would decode and
    re-save it, so it is only used for the read-only preview.
    """

    def __init__(self, label: str):
        self.label = label
        self.file: Optional[gr.File] = None
        self.preview: Optional[gr.Image] = None
        self.value: Optional[gr.State] = None

    def render(self, height: int = 260) -> gr.State:
        """
        Render the upload widget and wire its change event

        Args:
            height: Preview height in pixels

        Returns:
            gr.State holding the current data URI (or None)
        """
        self.file = gr.File(
            label=self.label,
            file_types=["image"],
            file_count="single",
            type="filepath",
        )
        self.preview = gr.Image(
            label=f"{self.label} preview",
            type="filepath",
            height=height,
            interactive=False,
            show_download_button=False,
        )
        self.value = gr.State(None)

        # Replacing or clearing the file replaces the stored value wholesale
        self.file.change(
            fn=on_upload_change,
            inputs=[self.file],
            outputs=[self.value, self.preview],
        )
        return self.value
