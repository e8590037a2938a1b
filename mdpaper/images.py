"""
Inline local markdown images as base64 data URIs.

Only references of the form ``![alt](./path/to/image.ext)`` are touched, so the
rendered HTML never needs to reach the filesystem for pictures.

MIT License - Copyright (c) 2025 Markdown to PDF Converter
"""

import base64
import re
from pathlib import Path

from .console import ConsoleLogger
from .errors import ImageReadError

# Markdown image whose target starts with './' and ends with a supported extension
IMAGE_PATTERN = re.compile(
    r'!\[.*?\]\((\./.*?\.(png|jpg|jpeg|gif|svg))\)',
    flags=re.IGNORECASE,
)

MEDIA_TYPE_ALIASES = {'jpg': 'jpeg'}


def media_type_for(path: Path) -> str:
    ext = path.suffix[1:].lower()
    return f"image/{MEDIA_TYPE_ALIASES.get(ext, ext)}"


def image_to_data_uri(path: Path) -> str:
    """Read an image and return it as a data URI."""
    try:
        path = Path(path).resolve()
        data = path.read_bytes()
    except (OSError, ValueError) as e:
        raise ImageReadError(f"Cannot read image {path}: {e}") from e
    encoded = base64.b64encode(data).decode('ascii')
    return f"data:{media_type_for(path)};base64,{encoded}"


def inline_images(content: str, base_dir: Path, logger: ConsoleLogger) -> str:
    """Replace local image paths in markdown with embedded data URIs.

    Paths are resolved against ``base_dir``. An image that cannot be read is
    left exactly as written and the rest of the document is still processed.
    """
    base_dir = Path(base_dir)
    inlined = 0

    def _replace(match: re.Match) -> str:
        nonlocal inlined
        img_path = match.group(1)
        try:
            data_uri = image_to_data_uri(base_dir / img_path)
        except ImageReadError as e:
            logger.warning(f"Image not embedded, keeping original reference: {e}")
            return match.group(0)

        # Swap only the target inside the parentheses; alt text stays as is
        start = match.start(1) - match.start(0)
        end = match.end(1) - match.start(0)
        original = match.group(0)
        inlined += 1
        logger.debug(f"Embedded image: {img_path}")
        return original[:start] + data_uri + original[end:]

    processed = IMAGE_PATTERN.sub(_replace, content)
    if inlined:
        logger.debug(f"Embedded {inlined} image(s)")
    return processed
