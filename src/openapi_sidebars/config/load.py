"""Sidebar options loading from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any

import yaml

from openapi_sidebars.config.model import SidebarOptions
from openapi_sidebars.config.plugin import get_plugin_options


class PermissiveLoader(yaml.SafeLoader):
    """SafeLoader that ignores unknown Python tags.

    Configs exported from other tools sometimes carry Python-specific tags
    like !python/object/apply which SafeLoader rejects. This loader treats
    them as raw strings so the rest of the document can still be read.
    """


def _ignore_unknown(loader: yaml.Loader, tag_suffix: str, node: yaml.Node) -> str:
    """Return the raw tag as a placeholder string."""
    return f"<{node.tag}>"


# Register handler for all Python tags (both full and shorthand forms)
PermissiveLoader.add_multi_constructor("tag:yaml.org,2002:python/", _ignore_unknown)
PermissiveLoader.add_multi_constructor("!python/", _ignore_unknown)


def load_yaml(stream: str | IO[str]) -> Any:
    """Parse a YAML document without constructing arbitrary objects."""
    return yaml.load(stream, Loader=PermissiveLoader)


def load_options(options_path: Path) -> SidebarOptions:
    """Load sidebar options from a YAML (or JSON) file.

    The file is either a site config with a ``plugins`` section, in which
    case the openapi plugin entry is read, or a bare mapping of options.

    Args:
        options_path: Path to the options file.

    Returns:
        Resolved SidebarOptions.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a mapping or holds invalid options.
    """
    if not options_path.exists():
        raise FileNotFoundError(f"Options file not found: {options_path}")

    with open(options_path, encoding="utf-8") as f:
        raw = load_yaml(f)

    if raw is None:
        return SidebarOptions()
    if not isinstance(raw, dict):
        raise ValueError(f"Options file must be a mapping: {options_path}")

    if "plugins" in raw:
        plugin_options = get_plugin_options(raw)
        return SidebarOptions.from_mapping(plugin_options or {}, strict=False)
    return SidebarOptions.from_mapping(raw)
