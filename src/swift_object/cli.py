"""CLI for swift-object."""

import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import ObjectSettings, load_settings
from .constants import ENV_AUTH_TOKEN
from .errors import AuthError, ConfigError, ContentVerificationError, NotFoundError, ObjectError
from .hashing import compute_stream_etag, etags_match
from .remote_object import RemoteObject
from .transport import RequestsTransport
from .utils import humanize_size, name_from_url


app = typer.Typer(help="""\
Inspect and download single objects from a Swift-style object store.""")

console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_settings_or_exit(config: Optional[Path]) -> ObjectSettings:
    try:
        return load_settings(config)
    except ConfigError as e:
        err_console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(1)


def _head_object(url: str, token: str, name: Optional[str], settings: ObjectSettings) -> RemoteObject:
    """Build an object from a HEAD against ``url``."""
    obj = RemoteObject(
        name or name_from_url(url),
        token=token,
        url=url,
        transport=RequestsTransport.from_settings(settings),
        settings=settings,
    )
    obj.refresh(fetch_content=False)
    return obj


def _report_error(e: ObjectError, url: str) -> None:
    if isinstance(e, NotFoundError):
        err_console.print(f"[red]✗[/red] Object not found: {url}")
    elif isinstance(e, AuthError):
        err_console.print(f"[red]✗[/red] Authentication failed for {url}")
        err_console.print(f"[dim]Hint: check the token or set {ENV_AUTH_TOKEN}[/dim]")
    elif isinstance(e, ContentVerificationError):
        err_console.print("[red]✗[/red] Content verification failed")
        err_console.print(f"  Expected: {e.expected}")
        err_console.print(f"  Got:      {e.computed}")
    else:
        err_console.print(f"[red]✗[/red] {e}")


@app.command()
def stat(
    url: str = typer.Argument(..., help="Object URL"),
    token: str = typer.Option(..., "--token", "-t", envvar=ENV_AUTH_TOKEN, help="Auth token"),
    name: Optional[str] = typer.Option(None, "--name", help="Object name (defaults to URL tail)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings YAML file"),
):
    """Show object metadata without downloading content."""
    settings = _load_settings_or_exit(config)
    try:
        obj = _head_object(url, token, name, settings)
    except ObjectError as e:
        _report_error(e, url)
        raise typer.Exit(1)

    table = Table(title=obj.name, show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("URL", url)
    table.add_row("Content-Type", obj.content_type())
    table.add_row("Size", f"{obj.content_length()} ({humanize_size(obj.content_length())})")
    table.add_row("Etag", obj.etag())
    modified = obj.last_modified()
    table.add_row("Last-Modified", modified.isoformat() if modified else "-")
    for key, value in sorted(obj.metadata().items()):
        table.add_row(f"Meta {key}", value)
    console.print(table)


@app.command()
def cat(
    url: str = typer.Argument(..., help="Object URL"),
    token: str = typer.Option(..., "--token", "-t", envvar=ENV_AUTH_TOKEN, help="Auth token"),
    verify: bool = typer.Option(True, "--verify/--no-verify", help="Check content against etag"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings YAML file"),
):
    """Write verified object content to stdout."""
    settings = _load_settings_or_exit(config)
    obj = RemoteObject(
        name_from_url(url),
        token=token,
        url=url,
        transport=RequestsTransport.from_settings(settings),
        settings=settings,
    )
    obj.set_content_verification(verify)

    result = obj.try_content()
    if not result.ok:
        _report_error(result.error, url)
        raise typer.Exit(1)

    sys.stdout.buffer.write(result.content)
    sys.stdout.flush()


@app.command()
def get(
    url: str = typer.Argument(..., help="Object URL"),
    dest: Path = typer.Argument(..., help="Destination file"),
    token: str = typer.Option(..., "--token", "-t", envvar=ENV_AUTH_TOKEN, help="Auth token"),
    verify: bool = typer.Option(False, "--verify/--no-verify", help="Check the saved file against etag"),
    config: Optional[Path] = typer.Option(None, "--config", help="Settings YAML file"),
):
    """Stream an object to a local file, optionally checking it against the etag."""
    settings = _load_settings_or_exit(config)
    obj = RemoteObject(
        name_from_url(url),
        token=token,
        url=url,
        transport=RequestsTransport.from_settings(settings),
        settings=settings,
    )
    try:
        stream = obj.stream(refresh=True)
    except ObjectError as e:
        _report_error(e, url)
        raise typer.Exit(1)

    dest.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(dest, "wb") as f:
            shutil.copyfileobj(stream, f, settings.chunk_size)
    finally:
        stream.close()

    if verify:
        with open(dest, "rb") as f:
            check = compute_stream_etag(f, settings.chunk_size)
        if not etags_match(check, obj.etag()):
            dest.unlink()
            _report_error(ContentVerificationError(check, obj.etag(), obj.name), url)
            raise typer.Exit(1)

    console.print(f"[green]✓[/green] Saved {obj.name} to {dest} ({humanize_size(dest.stat().st_size)})")


if __name__ == "__main__":
    app()
