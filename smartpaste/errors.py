"""Error taxonomy for Smart Paste.

Every failure of a paste invocation is one of these. None of them are retried;
the action converts them into a failed PasteResult.
"""


class SmartPasteError(Exception):
    """Base class for paste failures. `kind` names the failure in results and logs."""

    kind = "SmartPasteError"
    default_message = "Smart paste failed"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class NoActiveSession(SmartPasteError):
    kind = "NoActiveSession"
    default_message = (
        "No active terminal session. Run inside tmux or a WezTerm/kitty terminal with remote control, "
        "or set the 'session' config key."
    )


class UnsupportedClipboardContent(SmartPasteError):
    kind = "UnsupportedClipboardContent"
    default_message = "No supported clipboard content found"


class EmptyClipboard(UnsupportedClipboardContent):
    """Nothing at all is on the clipboard."""

    kind = "EmptyClipboard"
    default_message = "Clipboard is empty"


class EmptyImageVariantSet(SmartPasteError):
    kind = "EmptyImageVariantSet"
    default_message = "Clipboard image bundle has no variants"


class ClipboardReadError(SmartPasteError):
    kind = "ClipboardReadError"
    default_message = "Could not read clipboard content"


class TerminalPanelNotFound(SmartPasteError):
    kind = "TerminalPanelNotFound"
    default_message = "Terminal session not found. Please start tmux first."


class NoTabSelected(SmartPasteError):
    kind = "NoTabSelected"
    default_message = "No terminal window selected. Please open a tmux window first."


class TerminalHandleUnavailable(SmartPasteError):
    kind = "TerminalHandleUnavailable"
    default_message = "Could not get a writable terminal"


class AmbiguousFallbackTarget(SmartPasteError):
    kind = "AmbiguousFallbackTarget"
    default_message = "Several terminal tabs could receive the paste and none matches the selected window"


class TerminalWriteError(SmartPasteError):
    kind = "TerminalWriteError"
    default_message = "Error sending to terminal"
