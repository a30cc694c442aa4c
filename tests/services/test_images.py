"""
Tests for image validation and data URL conversion.
"""

import base64
import threading

import pytest

from hashnotes.services import images
from hashnotes.services.images import (
    create_image_asset,
    create_image_assets,
    file_to_data_url,
    guess_mime_type,
    is_valid_image_file,
)
from hashnotes.utils.exceptions import ImageError

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "ism.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def text_file(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("not an image")
    return path


@pytest.mark.unit
class TestImageValidation:
    """Tests for MIME type and size checks."""

    def test_guess_mime_type(self):
        assert guess_mime_type("a.png") == "image/png"
        assert guess_mime_type("a.jpg") == "image/jpeg"
        assert guess_mime_type("a.unknownext") is None

    def test_valid_png(self, png_file):
        assert is_valid_image_file(png_file) is True

    def test_rejects_non_image(self, text_file):
        assert is_valid_image_file(text_file) is False

    def test_size_limit_is_exclusive(self, png_file):
        assert is_valid_image_file(png_file, max_bytes=len(PNG_BYTES)) is False
        assert is_valid_image_file(png_file, max_bytes=len(PNG_BYTES) + 1) is True

    def test_missing_file(self, tmp_path):
        assert is_valid_image_file(tmp_path / "gone.png") is False


@pytest.mark.unit
class TestImageConversion:
    """Tests for async conversion."""

    @pytest.mark.asyncio
    async def test_file_to_data_url(self, png_file):
        data_url = await file_to_data_url(png_file)

        prefix = "data:image/png;base64,"
        assert data_url.startswith(prefix)
        assert base64.b64decode(data_url[len(prefix):]) == PNG_BYTES

    @pytest.mark.asyncio
    async def test_validation_runs_in_worker_thread(self, png_file, monkeypatch):
        threads = []
        original = images.is_valid_image_file

        def recording_check(path, max_bytes):
            threads.append(threading.current_thread())
            return original(path, max_bytes)

        monkeypatch.setattr(images, "is_valid_image_file", recording_check)

        await file_to_data_url(png_file)

        assert len(threads) == 1
        assert threads[0] is not threading.main_thread()

    @pytest.mark.asyncio
    async def test_invalid_file_raises(self, text_file):
        with pytest.raises(ImageError):
            await file_to_data_url(text_file)

    @pytest.mark.asyncio
    async def test_create_image_asset(self, png_file):
        asset = await create_image_asset(png_file, alt="ISM", caption="Instances")

        assert asset.id.startswith("img_")
        assert asset.alt == "ISM"
        assert asset.caption == "Instances"
        assert asset.data_url.startswith("data:image/png;base64,")

    @pytest.mark.asyncio
    async def test_batch_isolates_failures(self, png_file, text_file, tmp_path):
        second = tmp_path / "second.png"
        second.write_bytes(PNG_BYTES)

        assets, errors = await create_image_assets([png_file, text_file, second])

        assert len(assets) == 2
        assert len({asset.id for asset in assets}) == 2
        assert len(errors) == 1
        assert isinstance(errors[0], ImageError)
        assert errors[0].context["path"] == str(text_file)

    @pytest.mark.asyncio
    async def test_empty_batch(self):
        assert await create_image_assets([]) == ([], [])
