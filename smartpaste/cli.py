#!/usr/bin/env python
"""Smart Paste CLI - paste the clipboard into the active terminal."""

import sys

import click

from smartpaste import __version__
from smartpaste.action import smart_paste
from smartpaste.clipboard import get_snapshot
from smartpaste.config import CONFIG_FILE, LOG_FILE, get_fallback_managers, get_scratch_dir, get_scratch_policy
from smartpaste.errors import SmartPasteError
from smartpaste.logging_setup import setup_logging
from smartpaste.scratch import ScratchDir
from smartpaste.terminal import MANAGERS, available_managers, find_panel, resolve_workspace


def print_step(message: str):
    click.echo(click.style(f"🔧 {message}", fg='blue'))


def print_success(message: str):
    click.echo(click.style(f"✅ {message}", fg='green'))


def print_warning(message: str):
    click.echo(click.style(f"⚠️  {message}", fg='yellow'))


def print_error(message: str):
    click.echo(click.style(f"❌ {message}", fg='red'), err=True)


@click.group(invoke_without_command=True)
@click.option('--log-level', default=None, help='Override SMARTPASTE_LOG_LEVEL')
@click.option('-v', '--verbose', is_flag=True, help='Also print log messages to stderr')
@click.version_option(__version__, prog_name='smartpaste')
@click.pass_context
def cli(ctx, log_level, verbose):
    """Smart Paste - paste screenshots, files and text into the active terminal.

    Running without a subcommand pastes the clipboard.
    """
    setup_logging(log_level, console=verbose)
    if ctx.invoked_subcommand is None:
        ctx.invoke(paste)


@cli.command()
@click.option('-s', '--session', default=None, help='tmux session to paste into (default: current)')
@click.option('--dry-run', is_flag=True, help='Print what would be pasted without writing it')
def paste(session, dry_run):
    """Paste the clipboard into the selected tmux window or terminal tab.

    \b
    - Images are saved as PNG and their path is pasted
    - Copied files are pasted as a space separated list of paths
    - Plain text is pasted as is

    Nothing is executed: no newline is added.

    \b
    Examples:
      smartpaste                      # Paste into the current tmux session
      smartpaste paste -s work        # Paste into the 'work' session
      bind-key V run-shell "smartpaste paste"   # tmux key binding
    """
    result = smart_paste(session=session, dry_run=dry_run)

    if not result.ok:
        print_error(f"{result.kind}: {result.message}")
        sys.exit(1)

    if dry_run:
        click.echo(result.payload)
    else:
        print_success(result.message)


@cli.command()
def inspect():
    """Show which representations the clipboard offers."""
    try:
        snapshot = get_snapshot()
    except SmartPasteError as e:
        print_error(f"{e.kind}: {e.message}")
        sys.exit(1)

    if snapshot.is_empty():
        print_warning("Clipboard is empty")
        return

    offered = snapshot.describe()
    if not offered:
        print_warning("Clipboard has no supported content")
    else:
        click.echo("Clipboard offers (first one is pasted):")
        for name in offered:
            click.echo(f"  • {name}")

    types = getattr(snapshot, "types", None)
    if types:
        click.echo()
        click.echo("Raw clipboard types:")
        for t in types:
            click.echo(f"  {t}")


@cli.command()
@click.option('-s', '--session', default=None, help='tmux session to check (default: current)')
def status(session):
    """Check where a paste would go."""
    try:
        workspace = resolve_workspace(session)
        panel = find_panel(workspace)
        tab = panel.selected_tab()
    except SmartPasteError as e:
        print_error(f"{e.kind}: {e.message}")
    else:
        if workspace.in_tmux:
            print_success(f"tmux session '{workspace.session}', window {tab.index}:{tab.name}")
        else:
            print_success(f"No tmux session, terminal tab '{tab.name}'")
        sink = panel.input_sink(tab)
        if sink is not None:
            click.echo(f"  Primary target: {sink.describe()}")
        elif workspace.in_tmux:
            print_warning(f"Cannot paste: {panel.describe_tab(tab)}")
        else:
            click.echo(f"  Fallback target: {panel.describe_tab(tab)}")

    click.echo()
    click.echo("Fallback managers:")
    enabled = get_fallback_managers()
    available = {m.name for m in available_managers()}
    for name in MANAGERS:
        if name not in enabled:
            click.echo(f"  {name}: disabled")
        elif name in available:
            click.echo(f"  {name}: available")
        else:
            click.echo(f"  {name}: not detected")

    click.echo()
    click.echo("Paths:")
    click.echo(f"  Config:  {CONFIG_FILE}")
    click.echo(f"  Log:     {LOG_FILE}")
    click.echo(f"  Scratch: {get_scratch_dir()} (policy: {get_scratch_policy()})")


@cli.command()
@click.option('-y', '--yes', is_flag=True, help='Delete without prompting')
def clean(yes):
    """Delete saved clipboard screenshots."""
    scratch = ScratchDir()
    files = scratch.files()
    if not files:
        print_success("No screenshots to delete")
        return

    if not yes:
        if not click.confirm(f"Delete {len(files)} screenshots from {scratch.base_dir}?", default=True):
            click.echo("Cancelled")
            return

    print_step(f"Deleting {len(files)} screenshots...")
    removed = scratch.clear()
    print_success(f"Deleted {len(removed)} screenshots")


def main():
    cli()


if __name__ == "__main__":
    main()
