"""Scratch directory for pasted screenshots."""

import atexit
import logging
import os
import tempfile
from pathlib import Path

from PIL import Image

from smartpaste.config import (
    SCRATCH_PREFIX,
    SCRATCH_SUFFIX,
    get_scratch_dir,
    get_scratch_limit,
    get_scratch_policy,
)

logger = logging.getLogger("smartpaste")


class ScratchDir:
    """Owns the PNG files written for image pastes.

    Files must outlive the paste itself because the pasted command line refers
    to them, so release follows the configured policy instead of happening
    right after the write.
    """

    def __init__(self, base_dir: Path | None = None, policy: str | None = None, limit: int | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else get_scratch_dir()
        self.policy = policy or get_scratch_policy()
        self.limit = limit if limit is not None else get_scratch_limit()

    def save_image(self, image: Image.Image) -> Path:
        """Write an image as a uniquely named PNG and return its absolute path."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix=SCRATCH_PREFIX, suffix=SCRATCH_SUFFIX, dir=self.base_dir)
        path = Path(name).absolute()
        try:
            with os.fdopen(fd, "wb") as f:
                image.save(f, format="PNG")
        except Exception:
            path.unlink(missing_ok=True)
            raise
        logger.info("Saved clipboard image to %s", path)
        self._apply_policy(path)
        return path

    def files(self) -> list[Path]:
        """Scratch files, oldest first."""
        if not self.base_dir.exists():
            return []
        found = [p for p in self.base_dir.glob(f"{SCRATCH_PREFIX}*{SCRATCH_SUFFIX}") if p.is_file()]
        return sorted(found, key=lambda p: p.stat().st_mtime)

    def prune(self, keep: int, protect: Path | None = None) -> list[Path]:
        """Delete all but the newest `keep` scratch files.

        `protect` is never deleted and counts towards `keep`.
        """
        files = self.files()
        if protect is not None:
            protect = protect.resolve()
            others = [p for p in files if p.resolve() != protect]
            if len(others) != len(files):
                keep -= 1
            files = others
        stale = files[:max(len(files) - keep, 0)]
        removed = []
        for path in stale:
            try:
                path.unlink()
                removed.append(path)
            except OSError as e:
                logger.debug("Could not remove %s: %s", path, e)
        if removed:
            logger.debug("Pruned %d scratch files", len(removed))
        return removed

    def clear(self) -> list[Path]:
        return self.prune(0)

    def _apply_policy(self, path: Path):
        if self.policy == "bounded":
            self.prune(self.limit, protect=path)
        elif self.policy == "on_exit":
            _delete_at_exit(path)


_pending: list[Path] = []
_cleanup_registered = False


def _delete_at_exit(path: Path):
    """Queue a file for deletion when the process exits. One exit hook per process."""
    global _cleanup_registered
    _pending.append(path)
    if not _cleanup_registered:
        atexit.register(_cleanup_pending)
        _cleanup_registered = True


def _cleanup_pending():
    for path in _pending:
        path.unlink(missing_ok=True)
    _pending.clear()
