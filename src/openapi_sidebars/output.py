"""Sidebar serialization to JSON or YAML."""

from __future__ import annotations

import io
import json
from pathlib import Path

from ruamel.yaml import YAML

from openapi_sidebars.models import SidebarItem, sidebar_to_dicts

FORMATS = ("json", "yaml")


def render_sidebar(items: list[SidebarItem], fmt: str = "json") -> str:
    """Render a sidebar as JSON or YAML text.

    Args:
        items: Top-level sidebar nodes.
        fmt: Either "json" or "yaml".

    Returns:
        Serialized sidebar, ending with a newline.

    Raises:
        ValueError: If the format is not supported.
    """
    data = sidebar_to_dicts(items)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        yaml = YAML()
        yaml.default_flow_style = False
        yaml.indent(mapping=2, sequence=4, offset=2)
        buffer = io.StringIO()
        yaml.dump(data, buffer)
        return buffer.getvalue()
    raise ValueError(f"Unsupported output format: {fmt!r} (expected json or yaml)")


def write_sidebar(
    items: list[SidebarItem],
    output_path: Path,
    fmt: str = "json",
    dry_run: bool = False,
) -> str:
    """Write a rendered sidebar to disk.

    Args:
        items: Top-level sidebar nodes.
        output_path: File to write.
        fmt: Either "json" or "yaml".
        dry_run: If True, render without writing.

    Returns:
        The rendered text.
    """
    content = render_sidebar(items, fmt)
    if not dry_run:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    return content
