"""Read-once views of the system clipboard."""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any
from urllib.parse import unquote, urlparse

from PIL import Image, ImageSequence, UnidentifiedImageError

from smartpaste.errors import ClipboardReadError


class Representation(Enum):
    """Clipboard representations, in paste priority order."""

    IMAGE = "image"
    FILE_LIST = "file_list"
    TEXT = "text"


@dataclass
class ImageBundle:
    """Several pixel-density variants of the same picture, lowest index first."""

    variants: list[Image.Image] = field(default_factory=list)


class ClipboardSnapshot(ABC):
    """View of the clipboard at invocation time.

    Borrowed for a single resolution call. Subclasses answer which
    representations are offered and materialize them on demand.
    """

    @abstractmethod
    def offers(self, rep: Representation) -> bool:
        pass

    @abstractmethod
    def extract(self, rep: Representation) -> Any:
        """Materialize a representation.

        IMAGE yields an Image or ImageBundle, FILE_LIST a list of paths,
        TEXT a str.
        """

    @abstractmethod
    def is_empty(self) -> bool:
        pass

    def describe(self) -> list[str]:
        return [rep.value for rep in Representation if self.offers(rep)]


class StaticSnapshot(ClipboardSnapshot):
    """Snapshot over representations that are already materialized."""

    def __init__(self, representations: dict[Representation, Any] | None = None):
        self._representations = {
            rep: value for rep, value in (representations or {}).items() if value is not None
        }

    def offers(self, rep: Representation) -> bool:
        return rep in self._representations

    def extract(self, rep: Representation) -> Any:
        if rep not in self._representations:
            raise ClipboardReadError(f"Clipboard does not offer {rep.value}")
        return self._representations[rep]

    def is_empty(self) -> bool:
        return not self._representations


def load_image(data: bytes | Image.Image) -> Image.Image | ImageBundle:
    """Decode clipboard image data.

    Multi-frame images (e.g. TIFF with several resolutions) become a bundle.
    """
    if isinstance(data, Image.Image):
        image = data
    else:
        try:
            image = Image.open(io.BytesIO(data))
        except (UnidentifiedImageError, OSError) as e:
            raise ClipboardReadError(f"Could not decode clipboard image: {e}") from e

    if getattr(image, "n_frames", 1) > 1:
        return ImageBundle([frame.copy() for frame in ImageSequence.Iterator(image)])
    image.load()
    return image


def parse_uri_list(data: bytes | str) -> list[Path]:
    """Parse text/uri-list or x-special/gnome-copied-files data into local paths.

    Non-file URIs are skipped.
    """
    text = data.decode("utf-8", errors="ignore") if isinstance(data, bytes) else data
    lines = [line.strip() for line in text.replace("\r", "\n").split("\n") if line.strip()]
    if lines and lines[0].lower() in {"copy", "cut"}:
        lines = lines[1:]

    paths: list[Path] = []
    for entry in lines:
        if entry.startswith("#"):
            continue
        parsed = urlparse(entry)
        if parsed.scheme == "file":
            paths.append(Path(unquote(parsed.path)))
        elif not parsed.scheme and entry.startswith("/"):
            paths.append(Path(entry))
    return paths
