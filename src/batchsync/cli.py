"""batchsync CLI — preview a batch of rsync jobs in a pager, then run them."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from batchsync import __version__

app = typer.Typer(
    name="batchsync",
    help="Preview and run a batch of rsync jobs.",
    add_completion=False,
)

console = Console(stderr=True)
out = Console()


def _fail(msg: str) -> None:
    """Print *msg* as an error and exit 1."""
    console.print(f"[red]{escape(msg)}[/red]", soft_wrap=True)
    raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        print(f"batchsync {__version__}")
        raise typer.Exit()


@app.command()
def main(
    paths: Optional[List[str]] = typer.Argument(
        None, metavar="CONFIG TARGET", help="Job list file and target root directory",
    ),
    pager: Optional[str] = typer.Option(
        None, "--pager", "-p", help="Pager used to show the diff (called with -R)",
    ),
    max_tries: Optional[int] = typer.Option(
        None, "--max-tries", help="Invalid answers accepted before giving up",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Show the pending changes of every job in CONFIG and sync them into TARGET."""
    from batchsync import runner
    from batchsync.config.loader import ConfigError, load_config
    from batchsync.diff.parser import DiffTreeError
    from batchsync.output.pager import PagerError, show_report
    from batchsync.prompt import confirm
    from batchsync.rsync.adapter import RsyncError

    if not paths or len(paths) != 2:
        _fail("Need exactly two arguments (config & target location)")
    config_path, target_root = paths

    # --- Load and validate ---
    try:
        cfg = load_config(
            Path(config_path), Path(target_root), pager=pager, max_tries=max_tries,
        )
    except ConfigError as exc:
        _fail(str(exc))

    def notify(msg: str) -> None:
        if verbose:
            console.print(f"[dim]{escape(msg)}[/dim]", soft_wrap=True)

    notify(f"Jobs loaded: {len(cfg.jobs)}")

    # --- Dry run ---
    try:
        results = runner.preview(cfg.jobs, rsync=cfg.options.rsync, notify=notify)
    except (RsyncError, DiffTreeError) as exc:
        _fail(str(exc))

    if not any(r.has_changes for r in results):
        out.print("[bold green]No changes, everything up to date[/bold green]")
        raise typer.Exit(code=0)

    # --- Review ---
    try:
        show_report(results, cfg.options.pager)
    except PagerError as exc:
        _fail(str(exc))

    if not confirm("Syncing?", cfg.options.max_tries):
        raise typer.Exit(code=0)

    # --- Sync ---
    try:
        runner.apply(cfg.jobs, rsync=cfg.options.rsync, notify=notify)
    except RsyncError as exc:
        _fail(str(exc))
