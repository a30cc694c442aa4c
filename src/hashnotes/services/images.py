"""
Image file validation and conversion to data URLs.

Conversion is the only asynchronous boundary in HashNotes. File checks and
reads run in a worker thread so the caller's event loop stays free.
Concurrent conversions are independent of each other and of store
mutations; a failed conversion affects only that image.
"""

import asyncio
import base64
import mimetypes
from pathlib import Path

from hashnotes.models.note import ImageAsset
from hashnotes.utils.exceptions import ImageError
from hashnotes.utils.id_generator import generate_image_id
from hashnotes.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_IMAGE_BYTES = 10 * 1024 * 1024


def guess_mime_type(path: str | Path) -> str | None:
    """Guess a file's MIME type from its extension."""
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type


def is_valid_image_file(path: str | Path, max_bytes: int = DEFAULT_MAX_IMAGE_BYTES) -> bool:
    """
    Check that a file looks like an image and is under the size limit.

    Args:
        path: File path
        max_bytes: Exclusive size limit

    Returns:
        True if the MIME type is image/* and the file is smaller than max_bytes
    """
    mime_type = guess_mime_type(path)
    if not mime_type or not mime_type.startswith("image/"):
        return False
    try:
        return Path(path).stat().st_size < max_bytes
    except OSError:
        return False


async def file_to_data_url(path: str | Path, max_bytes: int = DEFAULT_MAX_IMAGE_BYTES) -> str:
    """
    Read an image file into a base64 data URL.

    Args:
        path: Image file path
        max_bytes: Exclusive size limit

    Returns:
        "data:<mime>;base64,<payload>"

    Raises:
        ImageError: If the file isn't a valid image or can't be read
    """
    path = Path(path)
    # stat() and read_bytes() both touch the filesystem, keep them off the loop
    if not await asyncio.to_thread(is_valid_image_file, path, max_bytes):
        raise ImageError(f"Not a valid image file: {path}", context={"path": str(path)})

    try:
        data = await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        raise ImageError(f"Failed to read image {path}: {e}", context={"path": str(path)}) from e

    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{guess_mime_type(path)};base64,{encoded}"


async def create_image_asset(
    path: str | Path,
    alt: str | None = None,
    caption: str | None = None,
    max_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
) -> ImageAsset:
    """Convert an image file into an ImageAsset with a fresh id."""
    data_url = await file_to_data_url(path, max_bytes)
    return ImageAsset(id=generate_image_id(), data_url=data_url, alt=alt, caption=caption)


async def create_image_assets(
    paths: list[str | Path],
    max_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
) -> tuple[list[ImageAsset], list[ImageError]]:
    """
    Convert several image files concurrently.

    Args:
        paths: Image file paths
        max_bytes: Exclusive size limit per file

    Returns:
        Tuple of (assets in input order for successful files, errors for
        failed ones)
    """
    outcomes = await asyncio.gather(
        *(create_image_asset(path, max_bytes=max_bytes) for path in paths),
        return_exceptions=True,
    )

    assets: list[ImageAsset] = []
    errors: list[ImageError] = []
    for path, outcome in zip(paths, outcomes):
        if isinstance(outcome, ImageError):
            logger.warning(f"Skipping image {path}: {outcome.message}")
            errors.append(outcome)
        elif isinstance(outcome, BaseException):
            raise outcome
        else:
            assets.append(outcome)

    return assets, errors
