import platform

from smartpaste.clipboard.snapshot import ClipboardSnapshot
from smartpaste.errors import ClipboardReadError


def get_snapshot() -> ClipboardSnapshot:
    """Take a snapshot of the system clipboard for the running platform."""
    system = platform.system()

    if system == "Linux":
        from smartpaste.clipboard.linux import get_linux_snapshot
        return get_linux_snapshot()
    elif system == "Darwin":
        from smartpaste.clipboard.macos import MacOSSnapshot
        return MacOSSnapshot()
    elif system == "Windows":
        from smartpaste.clipboard.windows import WindowsSnapshot
        return WindowsSnapshot()
    else:
        raise ClipboardReadError(f"Platform '{system}' is not supported")
