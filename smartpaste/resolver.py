"""Clipboard content resolution.

Turns whatever is on the clipboard into the single string that gets pasted.
Representations are tried in a fixed order and the first one offered wins:
an image beats a file list, which beats plain text. A screenshot or a file
copy usually also carries some incidental text, which is not what the user
meant to paste.
"""

import logging
import os
from pathlib import Path

from PIL import Image

from smartpaste.clipboard.snapshot import ClipboardSnapshot, ImageBundle, Representation
from smartpaste.errors import (
    ClipboardReadError,
    EmptyClipboard,
    EmptyImageVariantSet,
    UnsupportedClipboardContent,
)
from smartpaste.scratch import ScratchDir

logger = logging.getLogger("smartpaste")

BITMAP_MODE = "RGBA"


def quote_path(path: str) -> str:
    """Wrap a path in double quotes if it contains a space.

    Nothing else is escaped, so paths with quotes or other shell
    metacharacters are pasted as they are.
    """
    return f'"{path}"' if " " in path else path


def join_paths(paths) -> str:
    return " ".join(quote_path(os.path.abspath(os.fspath(p))) for p in paths)


def to_bitmap(image: Image.Image | ImageBundle) -> Image.Image:
    """Coerce clipboard image data to an RGBA bitmap.

    Bundles contribute their first variant. Anything not already RGBA is
    drawn onto a fresh RGBA surface.
    """
    if isinstance(image, ImageBundle):
        if not image.variants:
            raise EmptyImageVariantSet()
        image = image.variants[0]

    if not isinstance(image, Image.Image):
        raise ClipboardReadError(f"Unexpected clipboard image type: {type(image).__name__}")

    if image.mode == BITMAP_MODE:
        return image

    surface = Image.new(BITMAP_MODE, image.size)
    surface.paste(image.convert(BITMAP_MODE), (0, 0))
    return surface


def resolve_payload(snapshot: ClipboardSnapshot, scratch: ScratchDir | None = None) -> str:
    """Resolve the clipboard snapshot to the text to paste.

    Raises EmptyClipboard, UnsupportedClipboardContent, EmptyImageVariantSet
    or ClipboardReadError.
    """
    if snapshot.is_empty():
        raise EmptyClipboard()

    if snapshot.offers(Representation.IMAGE):
        bitmap = to_bitmap(snapshot.extract(Representation.IMAGE))
        path = (scratch or ScratchDir()).save_image(bitmap)
        logger.debug("Resolved clipboard image (%dx%d)", *bitmap.size)
        payload = str(path)
    elif snapshot.offers(Representation.FILE_LIST):
        files: list[Path] = snapshot.extract(Representation.FILE_LIST)
        logger.debug("Resolved %d clipboard files", len(files))
        payload = join_paths(files)
    elif snapshot.offers(Representation.TEXT):
        payload = snapshot.extract(Representation.TEXT)
    else:
        raise UnsupportedClipboardContent()

    if not payload:
        raise UnsupportedClipboardContent()
    return payload
