"""macOS clipboard access through the AppKit pasteboard."""

from pathlib import Path

from AppKit import (
    NSPasteboard,
    NSPasteboardTypeFileURL,
    NSPasteboardTypePNG,
    NSPasteboardTypeString,
    NSPasteboardTypeTIFF,
)
from Foundation import NSURL

from smartpaste.clipboard.snapshot import Representation, StaticSnapshot, load_image


class MacOSSnapshot(StaticSnapshot):
    """Pasteboard snapshot. Screenshots arrive as TIFF with one frame per resolution."""

    def __init__(self, pasteboard=None):
        pasteboard = pasteboard or NSPasteboard.generalPasteboard()
        types = list(pasteboard.types() or [])
        super().__init__({
            Representation.IMAGE: self._get_image(pasteboard, types),
            Representation.FILE_LIST: self._get_files(pasteboard, types),
            Representation.TEXT: self._get_text(pasteboard, types),
        })
        self.types = types

    def is_empty(self) -> bool:
        return not self.types

    def _get_image(self, pasteboard, types):
        for pb_type in (NSPasteboardTypeTIFF, NSPasteboardTypePNG):
            if pb_type in types:
                data = pasteboard.dataForType_(pb_type)
                if data:
                    return load_image(bytes(data))
        return None

    def _get_files(self, pasteboard, types):
        if NSPasteboardTypeFileURL not in types:
            return None
        urls = pasteboard.readObjectsForClasses_options_([NSURL], None) or []
        paths = [Path(str(url.path())) for url in urls if url.isFileURL()]
        return paths or None

    def _get_text(self, pasteboard, types):
        if NSPasteboardTypeString not in types:
            return None
        text = pasteboard.stringForType_(NSPasteboardTypeString)
        return str(text) if text is not None else None
