"""Windows clipboard access through Pillow's ImageGrab and pyperclip."""

from pathlib import Path

import pyperclip
from PIL import Image, ImageGrab

from smartpaste.clipboard.snapshot import Representation, StaticSnapshot, load_image


class WindowsSnapshot(StaticSnapshot):
    """Snapshot of CF_DIB / CF_HDROP / CF_UNICODETEXT clipboard content."""

    def __init__(self):
        representations = {}

        grabbed = ImageGrab.grabclipboard()
        if isinstance(grabbed, Image.Image):
            representations[Representation.IMAGE] = load_image(grabbed)
        elif isinstance(grabbed, (list, tuple)) and grabbed:
            representations[Representation.FILE_LIST] = [Path(p) for p in grabbed]

        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException:
            text = None
        if text:
            representations[Representation.TEXT] = text

        super().__init__(representations)
