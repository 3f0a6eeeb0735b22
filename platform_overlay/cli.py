"""
Platform Overlay CLI

Inspect how a project's files resolve for a target platform:
- resolve: logical -> resolved path table
- cat: print the resolved file
- ls: list the resolved directory
- watch: stream change events
"""

import typer
from rich.console import Console
from rich.table import Table

from platform_overlay.common.exceptions import InvalidConfigurationError
from platform_overlay.common.observability import add_context, clear_context, get_logger
from platform_overlay.config import Settings
from platform_overlay.hosts import LocalFileSystemHost
from platform_overlay.infra.observability import setup_logging
from platform_overlay.overlay import PlatformOverlayFS
from platform_overlay.platforms import default_watch_options, overlay_from_settings

app = typer.Typer(name="platform-overlay", help="Platform-variant file resolution", add_completion=False)
console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)

PlatformOption = typer.Option(None, "--platform", "-p", help="Target platform: android/ios")
RootOption = typer.Option(None, "--root", help="Project root (default: settings)")
QualifierOption = typer.Option(None, "--qualifier", "-q", help="Base qualifier (repeatable, default: settings)")
PolicyOption = typer.Option(None, "--policy", help="Probe error policy: stop/continue")


def _build_overlay(
    settings: Settings,
    platform: str | None,
    root: str | None,
    qualifiers: list[str] | None,
    policy: str | None,
) -> PlatformOverlayFS:
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )

    try:
        overlay = overlay_from_settings(
            LocalFileSystemHost(root or settings.project.root),
            settings,
            platform,
            base_qualifiers=qualifiers,
            probe_error_policy=policy,
        )
    except (InvalidConfigurationError, ValueError) as e:
        err_console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(2)

    add_context(platform=overlay.qualifiers[-1])
    return overlay


@app.command()
def resolve(
    paths: list[str] = typer.Argument(..., help="Logical paths"),
    platform: str | None = PlatformOption,
    root: str | None = RootOption,
    qualifier: list[str] | None = QualifierOption,
    policy: str | None = PolicyOption,
):
    """
    Show which file each logical path resolves to.

    Examples:
        platform-overlay resolve app/app.component.ts -p ios
        platform-overlay resolve app/main.ts -p android -q tns -q mobile
    """
    overlay = _build_overlay(Settings(), platform, root, qualifier, policy)

    try:
        table = Table(title=f"Qualifiers: {', '.join(overlay.qualifiers)}")
        table.add_column("Logical", style="cyan")
        table.add_column("Resolved", style="green")

        for path in paths:
            resolved = overlay.resolve(path)
            marker = "" if resolved == path else " *"
            table.add_row(path, f"{resolved}{marker}")

        console.print(table)
    finally:
        clear_context()


@app.command()
def cat(
    path: str = typer.Argument(..., help="Logical path"),
    platform: str | None = PlatformOption,
    root: str | None = RootOption,
    qualifier: list[str] | None = QualifierOption,
    policy: str | None = PolicyOption,
):
    """Print the content of the file a logical path resolves to."""
    overlay = _build_overlay(Settings(), platform, root, qualifier, policy)

    try:
        content = overlay.read(path)
    except OSError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    finally:
        clear_context()

    typer.echo(content, nl=False)


@app.command()
def ls(
    path: str | None = typer.Argument(None, help="Logical directory (default: settings app path)"),
    platform: str | None = PlatformOption,
    root: str | None = RootOption,
    qualifier: list[str] | None = QualifierOption,
    policy: str | None = PolicyOption,
):
    """List the entries of the directory a logical path resolves to."""
    settings = Settings()
    overlay = _build_overlay(settings, platform, root, qualifier, policy)

    try:
        entries = overlay.list(path or settings.project.app_path)
    except OSError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)
    finally:
        clear_context()

    for entry in entries:
        typer.echo(entry)


@app.command()
def watch(
    path: str | None = typer.Argument(None, help="Logical path to watch (default: settings app path)"),
    platform: str | None = PlatformOption,
    root: str | None = RootOption,
    qualifier: list[str] | None = QualifierOption,
    policy: str | None = PolicyOption,
    max_events: int | None = typer.Option(None, "--max-events", help="Stop after N events"),
):
    """
    Stream change events until interrupted.

    App resources and hidden files are ignored.
    """
    settings = Settings()
    overlay = _build_overlay(settings, platform, root, qualifier, policy)
    options = default_watch_options(
        settings.project.app_resources_path,
        extra_ignored=settings.watch.ignored,
        recursive=settings.watch.recursive,
    )

    try:
        stream = overlay.watch(path or settings.project.app_path, options)
    except OSError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        clear_context()
        raise typer.Exit(1)

    console.print(f"[cyan]👀 Watching {stream.path}[/cyan]")
    seen = 0
    try:
        with stream:
            for event in stream:
                console.print(str(event))
                seen += 1
                if max_events is not None and seen >= max_events:
                    break
    except KeyboardInterrupt:
        logger.info("watch_interrupted", events=seen)
    finally:
        clear_context()


def main():
    app()


if __name__ == "__main__":
    main()
