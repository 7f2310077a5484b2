"""Linux clipboard access through wl-paste (Wayland) or xclip (X11)."""

import logging
import os
import shutil
from pathlib import Path
from typing import Any, Callable

from smartpaste.clipboard.snapshot import (
    ClipboardSnapshot,
    Representation,
    load_image,
    parse_uri_list,
)
from smartpaste.config import FILE_TARGETS, IMAGE_TARGETS, TEXT_TARGETS
from smartpaste.errors import ClipboardReadError
from smartpaste.utils import run_command

logger = logging.getLogger("smartpaste")

_TARGETS = {
    Representation.IMAGE: IMAGE_TARGETS,
    Representation.FILE_LIST: FILE_TARGETS,
    Representation.TEXT: TEXT_TARGETS,
}


class CommandSnapshot(ClipboardSnapshot):
    """Clipboard snapshot backed by a command line clipboard tool.

    The offered MIME targets are listed once when the snapshot is taken;
    content is only read for the representation that gets extracted.
    """

    def __init__(self, name: str, types: list[str], reader: Callable[[str], bytes | None]):
        self.name = name
        self.types = types
        self._reader = reader
        self._cache: dict[str, bytes | None] = {}
        self._lower = {t.lower(): t for t in types}

    @classmethod
    def wayland(cls) -> "CommandSnapshot":
        def reader(target: str) -> bytes | None:
            return run_command(["wl-paste", "--no-newline", "--type", target])

        types = _parse_type_list(run_command(["wl-paste", "--list-types"]))
        return cls("wl-paste", types, reader)

    @classmethod
    def x11(cls) -> "CommandSnapshot":
        def reader(target: str) -> bytes | None:
            return run_command(["xclip", "-selection", "clipboard", "-t", target, "-o"])

        types = _parse_type_list(
            run_command(["xclip", "-selection", "clipboard", "-t", "TARGETS", "-o"])
        )
        return cls("xclip", types, reader)

    @classmethod
    def detect(cls) -> "CommandSnapshot":
        if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste"):
            return cls.wayland()
        if shutil.which("xclip"):
            return cls.x11()
        raise ClipboardReadError("No clipboard tool found (install wl-clipboard or xclip)")

    def _read(self, target: str) -> bytes | None:
        if target not in self._cache:
            self._cache[target] = self._reader(self._lower[target.lower()])
        return self._cache[target]

    def _offered_targets(self, rep: Representation) -> list[str]:
        return [t for t in _TARGETS[rep] if t.lower() in self._lower]

    def _file_paths(self) -> list[Path]:
        for target in self._offered_targets(Representation.FILE_LIST):
            data = self._read(target)
            if data:
                paths = parse_uri_list(data)
                if paths:
                    return paths
        return []

    def offers(self, rep: Representation) -> bool:
        if rep is Representation.FILE_LIST:
            # Browsers put web links on text/uri-list, which are not files
            return bool(self._file_paths())
        return bool(self._offered_targets(rep))

    def extract(self, rep: Representation) -> Any:
        if rep is Representation.FILE_LIST:
            return self._file_paths()

        for target in self._offered_targets(rep):
            data = self._read(target)
            if data is None:
                continue
            if rep is Representation.IMAGE:
                return load_image(data)
            return data.decode("utf-8", errors="replace")

        raise ClipboardReadError(f"{self.name} could not read {rep.value} from the clipboard")

    def is_empty(self) -> bool:
        return not self.types


def _parse_type_list(data: bytes | None) -> list[str]:
    if not data:
        return []
    text = data.decode("utf-8", errors="ignore")
    return [line.strip() for line in text.splitlines() if line.strip()]


def get_linux_snapshot() -> CommandSnapshot:
    snapshot = CommandSnapshot.detect()
    logger.debug("Clipboard targets via %s: %s", snapshot.name, snapshot.types)
    return snapshot
