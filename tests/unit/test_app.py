"""Unit tests for Gradio event handlers and app construction."""

import os
from pathlib import Path

import gradio as gr
import pytest
from gradio.data_classes import FileData

from fusion_studio.ui.app import (
    _begin,
    _finish,
    create_app,
    on_fuse,
    on_generate_pose,
    on_generate_video,
    release_result,
)
from fusion_studio.ui.components import ImageUpload, capture_upload, on_upload_change
from fusion_studio.ui.controllers import (
    FusionController,
    GenerationController,
    PoseController,
    VideoController,
)
from fusion_studio.utils.image_utils import parse_data_uri

IMAGE = "data:image/png;base64,AAA"


def _functions(app):
    return list(app.fns.values())


def _named(functions, name):
    return [bf for bf in functions if getattr(bf.fn, "__name__", None) == name]


class TestCaptureUpload:
    """Tests for capture_upload."""

    def test_no_file_is_noop(self):
        assert capture_upload(None) is None
        assert capture_upload("") is None

    def test_reads_file(self, tmp_path, png_bytes, png_data_uri):
        path = tmp_path / "model.png"
        path.write_bytes(png_bytes)

        assert capture_upload(str(path)) == png_data_uri


class TestOnUploadChange:
    """Tests for the upload change handler."""

    def test_upload_sets_value_and_preview(self, tmp_path, png_bytes, png_data_uri):
        path = tmp_path / "person.png"
        path.write_bytes(png_bytes)

        assert on_upload_change(str(path)) == (png_data_uri, str(path))

    def test_clearing_resets_value_and_preview(self):
        assert on_upload_change(None) == (None, None)
        assert on_upload_change("") == (None, None)


class TestImageUpload:
    """Tests for the ImageUpload component wrapper."""

    def test_upload_keeps_original_bytes(self, tmp_path, rgba_png_bytes):
        """Test that an alpha PNG reaches the data URI byte for byte."""
        path = tmp_path / "product.png"
        path.write_bytes(rgba_png_bytes)

        with gr.Blocks():
            upload = ImageUpload("Product")
            upload.render()

        processed = upload.file.preprocess(FileData(path=str(path), orig_name="product.png"))
        mime_type, data = parse_data_uri(capture_upload(processed))

        assert mime_type == "image/png"
        assert data == rgba_png_bytes

    def test_change_event_wiring(self, tmp_path, png_bytes, png_data_uri):
        path = tmp_path / "person.png"
        path.write_bytes(png_bytes)

        with gr.Blocks() as demo:
            upload = ImageUpload("Person")
            state = upload.render()

        (change,) = _named(_functions(demo), "on_upload_change")

        assert state is upload.value
        assert [block is upload.file for block in change.inputs] == [True]
        assert change.outputs[0] is upload.value
        assert change.outputs[1] is upload.preview
        assert change.fn(str(path)) == (png_data_uri, str(path))
        assert change.fn(None) == (None, None)


class TestOnFuse:
    """Tests for the fusion click handler."""

    def test_success_writes_result_file(self, mock_generator):
        controller = FusionController()

        returned, result_path, status = on_fuse(mock_generator, controller, IMAGE, IMAGE, None)

        assert returned is controller
        assert Path(result_path).read_bytes() == b"BBB"
        assert controller.result == "data:image/png;base64,QkJC"
        assert status == "✅ Done"

    def test_missing_input_raises_toast(self, mock_generator):
        """Test that a validation failure becomes a gr.Error toast."""
        with pytest.raises(gr.Error) as exc_info:
            on_fuse(mock_generator, FusionController(), IMAGE, None, None)

        assert exc_info.value.message == "A product image is required."
        mock_generator.generate_image.assert_not_called()

    def test_previous_result_file_is_removed(self, mock_generator):
        controller = FusionController()
        _, first_path, _ = on_fuse(mock_generator, controller, IMAGE, IMAGE, None)

        mock_generator.generate_image.return_value = None
        with pytest.raises(gr.Error):
            on_fuse(mock_generator, controller, IMAGE, IMAGE, None)

        assert not os.path.exists(first_path)
        assert controller.result_path is None


class TestOnGeneratePose:
    def test_service_error_raises_toast(self, mock_generator):
        mock_generator.generate_image.side_effect = RuntimeError("model overloaded")

        with pytest.raises(gr.Error) as exc_info:
            on_generate_pose(mock_generator, PoseController(), IMAGE, IMAGE, IMAGE, "sitting")

        assert exc_info.value.message == "model overloaded"


class TestOnGenerateVideo:
    def test_success_writes_mp4(self, mock_generator):
        controller = VideoController()

        _, result_path, _ = on_generate_video(mock_generator, controller, IMAGE, None)

        assert result_path.endswith(".mp4")
        assert controller.prompt == ""


class TestGenerateButtonLifecycle:
    """Tests for disabling and re-enabling the Generate buttons."""

    def test_begin_disables_and_clears(self):
        button, result, status = _begin()

        assert button["interactive"] is False
        assert result is None
        assert status == ""

    def test_finish_enables(self):
        assert _finish()["interactive"] is True

    @pytest.mark.parametrize("handler", ["on_fuse", "on_generate_pose", "on_generate_video"])
    def test_chain_reenables_after_failure(self, mock_generator, handler):
        """Test that the re-enable step runs even when the handler raises."""
        functions = _functions(create_app(generator=mock_generator))
        by_id = {bf._id: bf for bf in functions}

        (run,) = _named(functions, handler)
        begin = by_id[run.trigger_after]
        (finish,) = [bf for bf in functions if bf.trigger_after == run._id]

        assert begin.fn is _begin
        assert finish.fn is _finish
        assert run.trigger_only_on_success is False
        assert finish.trigger_only_on_success is False
        assert finish.outputs[0] is begin.outputs[0]
        assert isinstance(begin.outputs[0], gr.Button)

    def test_failed_click_leaves_button_enabled(self, mock_generator):
        """Test the chain's three steps in order with a failing handler."""
        functions = _functions(create_app(generator=mock_generator))
        (run,) = _named(functions, "on_fuse")
        mock_generator.generate_image.side_effect = RuntimeError("quota exceeded")

        assert _begin()[0]["interactive"] is False
        with pytest.raises(gr.Error):
            run.fn(FusionController(), IMAGE, IMAGE, None)
        assert _finish()["interactive"] is True


class TestReleaseResult:
    """Tests for session-end cleanup of result files."""

    def test_removes_result_file(self, mock_generator):
        controller = FusionController()
        _, result_path, _ = on_fuse(mock_generator, controller, IMAGE, IMAGE, None)

        release_result(controller)

        assert not os.path.exists(result_path)
        assert controller.result_path is None

    def test_without_result_is_noop(self):
        controller = VideoController()

        release_result(controller)
        release_result(None)

        assert controller.result_path is None

    def test_session_states_release_on_delete(self, mock_generator):
        app = create_app(generator=mock_generator)
        states = [
            block for block in app.blocks.values()
            if isinstance(block, gr.State) and isinstance(block.value, GenerationController)
        ]

        assert len(states) == 3
        assert all(state.delete_callback is release_result for state in states)


class TestCreateApp:
    def test_builds_blocks(self, mock_generator):
        app = create_app(generator=mock_generator)

        assert isinstance(app, gr.Blocks)
