"""Command-line interface."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
import yaml

from openapi_sidebars import __version__
from openapi_sidebars.category import CategoryMetadataError, read_category_metadata_file
from openapi_sidebars.config import SidebarOptions, load_options
from openapi_sidebars.items import load_items
from openapi_sidebars.models import is_api_item, is_info_item
from openapi_sidebars.output import FORMATS, render_sidebar, write_sidebar
from openapi_sidebars.sidebars import generate_sidebars


def _make_logger(
    quiet: bool, verbose: bool = False
) -> tuple[Callable[..., None], Callable[..., None]]:
    """Create log and log_verbose functions for CLI output.

    Args:
        quiet: If True, suppress all output.
        verbose: If True, enable verbose logging (quiet overrides this).

    Returns:
        Tuple of (log, log_verbose) functions.
    """
    effective_verbose = verbose and not quiet

    def log(msg: str, color: str = "green", err: bool = False) -> None:
        if not quiet:
            typer.secho(msg, fg=color, err=err)

    def log_verbose(msg: str, color: str = "green", err: bool = False) -> None:
        if effective_verbose:
            typer.secho(msg, fg=color, err=err)

    return log, log_verbose


def version_callback(value: bool) -> None:
    """Print version and exit if --version flag is set."""
    if value:
        typer.echo(f"openapi-sidebars {__version__}")
        raise typer.Exit()


app = typer.Typer(
    help="Generate API documentation sidebars from page descriptors.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Generate API documentation sidebars from page descriptors."""


@app.command()
def build(
    items_file: Annotated[
        Path,
        typer.Argument(help="JSON or YAML file with the page descriptors"),
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (defaults to stdout)"),
    ] = None,
    fmt: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: json or yaml"),
    ] = "json",
    options_file: Annotated[
        Path | None,
        typer.Option("--options", help="YAML file with sidebar options"),
    ] = None,
    collapsible: Annotated[
        bool | None,
        typer.Option(
            "--collapsible/--no-collapsible",
            help="Make generated categories collapsible",
            show_default=False,
        ),
    ] = None,
    collapsed: Annotated[
        bool | None,
        typer.Option(
            "--collapsed/--no-collapsed",
            help="Start generated categories collapsed",
            show_default=False,
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-n",
            help="Preview what would be generated without writing files",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed progress"),
    ] = False,
) -> None:
    """Generate a sidebar from a page descriptor file."""
    log, log_verbose = _make_logger(quiet, verbose)

    if fmt not in FORMATS:
        log(
            f"Error: Unsupported format '{fmt}' (expected json or yaml)",
            color="red",
            err=True,
        )
        raise typer.Exit(1)

    if not items_file.exists():
        log(f"Error: Items file not found: {items_file}", color="red", err=True)
        raise typer.Exit(1)

    # Options file first, command-line flags override it
    options = SidebarOptions()
    if options_file is not None:
        try:
            options = load_options(options_file)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            log(f"Error loading options: {e}", color="red", err=True)
            raise typer.Exit(1) from None
    if collapsible is not None:
        options.sidebar_collapsible = collapsible
    if collapsed is not None:
        options.sidebar_collapsed = collapsed

    try:
        items = load_items(items_file)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        log(f"Error loading items: {e}", color="red", err=True)
        raise typer.Exit(1) from None

    log_verbose(f"Items: {len(items)}", err=True)
    log_verbose(
        f"Options: collapsible={options.sidebar_collapsible}, "
        f"collapsed={options.sidebar_collapsed}",
        err=True,
    )

    sidebar = generate_sidebars(items, options)

    if output is None:
        typer.echo(render_sidebar(sidebar, fmt), nl=False)
        return

    if dry_run:
        log_verbose("Dry run - no files will be written", err=True)
    try:
        content = write_sidebar(sidebar, output, fmt, dry_run=dry_run)
    except OSError as exc:
        log(f"Error writing sidebar: {exc}", color="red", err=True)
        raise typer.Exit(1) from None

    action, color = ("Would generate", "yellow") if dry_run else ("Generated", "green")
    log(f"{action} {output} ({len(content):,} bytes)", color)


@app.command()
def validate(
    items_file: Annotated[
        Path,
        typer.Argument(help="JSON or YAML file with the page descriptors"),
    ],
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed item information"),
    ] = False,
) -> None:
    """Check a page descriptor file."""
    log, log_verbose = _make_logger(quiet, verbose)

    try:
        items = load_items(items_file)
    except FileNotFoundError:
        log(f"Items invalid: {items_file}", color="red", err=True)
        log(f"  Error: File not found: {items_file}", color="red", err=True)
        raise typer.Exit(1) from None
    except (ValueError, yaml.YAMLError) as e:
        log(f"Items invalid: {items_file}", color="red", err=True)
        log(f"  Error: {e}", color="red", err=True)
        raise typer.Exit(1) from None

    sources: dict[str, list[str]] = {}
    tags: dict[str, None] = {}
    for item in items:
        sources.setdefault(item.source, []).append(item.id)
        if is_api_item(item):
            tags.update(dict.fromkeys(tag for tag in item.api.tags or () if tag))

    log(f"Items valid: {items_file}")
    log(f"  Sources: {len(sources)}")
    log(f"  API pages: {sum(1 for item in items if is_api_item(item))}")
    log(f"  Info pages: {sum(1 for item in items if is_info_item(item))}")
    log(f"  Tags: {len(tags)}")

    for source, ids in sources.items():
        log_verbose(f"  {source}: {len(ids)} pages")
        for doc_id in ids:
            log_verbose(f"    - {doc_id}")


@app.command()
def category(
    category_dir: Annotated[
        Path,
        typer.Argument(help="Directory that may hold a _category_ metadata file"),
    ],
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress output (exit code only)"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show parsed metadata"),
    ] = False,
) -> None:
    """Read the category metadata file of a directory."""
    log, log_verbose = _make_logger(quiet, verbose)

    if not category_dir.is_dir():
        log(f"Error: Directory not found: {category_dir}", color="red", err=True)
        raise typer.Exit(1)

    try:
        metadata = read_category_metadata_file(category_dir)
    except CategoryMetadataError as e:
        log(str(e), color="red", err=True)
        raise typer.Exit(1) from None

    if metadata is None:
        log(f"No category metadata file in {category_dir}", color="yellow")
        return

    log(f"Category metadata: {metadata.path}")
    log_verbose(f"  label: {metadata.label}")
    log_verbose(f"  position: {metadata.position}")
    log_verbose(f"  collapsible: {metadata.collapsible}")
    log_verbose(f"  collapsed: {metadata.collapsed}")
    if metadata.class_name is not None:
        log_verbose(f"  className: {metadata.class_name}")


if __name__ == "__main__":
    app()
