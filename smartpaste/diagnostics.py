"""Failure reporting for Smart Paste."""

import logging
import platform
import shutil
import subprocess

from smartpaste.config import get_notify

logger = logging.getLogger("smartpaste")

PLATFORM = platform.system()

NOTIFY_TITLE = "Smart Paste"


def notify(title: str, message: str) -> bool:
    """Show a desktop notification (cross-platform)."""
    try:
        if PLATFORM == "Darwin":
            escaped = message.replace("\\", "\\\\").replace('"', '\\"')
            subprocess.run(
                ["osascript", "-e", f'display notification "{escaped}" with title "{title}"'],
                check=True, capture_output=True, timeout=5
            )
            return True
        elif PLATFORM == "Linux":
            if shutil.which("notify-send"):
                subprocess.run(["notify-send", "--app-name", title, title, message], check=True, timeout=5)
                return True
            logger.debug("notify-send not found, skipping notification")
            return False
        elif PLATFORM == "Windows":
            escaped = message.replace("'", "''")
            powershell_script = f'''
            Add-Type -AssemblyName System.Windows.Forms
            $balloon = New-Object System.Windows.Forms.NotifyIcon
            $balloon.Icon = [System.Drawing.SystemIcons]::Warning
            $balloon.BalloonTipTitle = '{title}'
            $balloon.BalloonTipText = '{escaped}'
            $balloon.Visible = $true
            $balloon.ShowBalloonTip(5000)
            '''
            subprocess.run(["powershell", "-Command", powershell_script], check=True, capture_output=True, timeout=5)
            return True
        else:
            return False
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.debug("Notification failed: %s", e)
        return False


def report_failure(kind: str, message: str) -> None:
    """Log a paste failure and, if enabled, show it to the user."""
    logger.error("Smart Paste Error: %s", message)
    if get_notify():
        notify(NOTIFY_TITLE, f"{kind}: {message}")
