"""The smart paste action: clipboard in, terminal input out."""

import logging
from dataclasses import dataclass

from smartpaste.clipboard import ClipboardSnapshot, get_snapshot
from smartpaste.diagnostics import report_failure
from smartpaste.errors import SmartPasteError
from smartpaste.resolver import resolve_payload
from smartpaste.scratch import ScratchDir
from smartpaste.terminal import resolve_workspace, send_to_terminal

logger = logging.getLogger("smartpaste")


@dataclass
class PasteResult:
    ok: bool
    payload: str | None = None
    target: str | None = None
    kind: str | None = None
    message: str = ""

    @classmethod
    def failure(cls, kind: str, message: str, payload: str | None = None) -> "PasteResult":
        return cls(ok=False, payload=payload, kind=kind, message=message)


def smart_paste(
    session: str | None = None,
    snapshot: ClipboardSnapshot | None = None,
    scratch: ScratchDir | None = None,
    dry_run: bool = False,
) -> PasteResult:
    """Paste the clipboard into the active terminal window without running it.

    Runs once, synchronously: one clipboard read and at most one terminal
    write. Failures never raise; they come back as a failed PasteResult and
    are reported through the log (and a notification, if enabled).

    With dry_run the payload is resolved but nothing is written.
    """
    payload = None
    try:
        workspace = None if dry_run else resolve_workspace(session)
        if snapshot is None:
            snapshot = get_snapshot()
        payload = resolve_payload(snapshot, scratch)

        if dry_run:
            return PasteResult(ok=True, payload=payload, message="Dry run, nothing written")

        target = send_to_terminal(workspace, payload)
        return PasteResult(ok=True, payload=payload, target=target, message=f"Pasted into {target}")
    except SmartPasteError as e:
        result = PasteResult.failure(e.kind, e.message, payload)
    except Exception as e:
        logger.exception("Unexpected error during smart paste")
        result = PasteResult.failure("InternalError", f"Error processing clipboard: {e}", payload)

    report_failure(result.kind, result.message)
    return result
