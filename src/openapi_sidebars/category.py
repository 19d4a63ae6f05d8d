"""Sidebar category metadata files (``_category_.json`` / ``.yml`` / ``.yaml``)."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from openapi_sidebars.config.load import load_yaml

CATEGORY_METADATA_FILENAME_BASE = "_category_"
CATEGORY_METADATA_EXTENSIONS = (".json", ".yml", ".yaml")

_STRING_KEYS = ("label", "className")
_BOOL_KEYS = ("collapsible", "collapsed")
_KNOWN_KEYS = {*_STRING_KEYS, *_BOOL_KEYS, "position", "link", "customProps"}


class CategoryMetadataError(ValueError):
    """Raised when a category metadata file cannot be parsed or is invalid."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(
            "The docs sidebar category metadata file looks invalid!\n"
            f"Path: {self.path}\n{reason}"
        )


@dataclass
class CategoryMetadata:
    """Parsed contents of a category metadata file."""

    path: str
    label: str | None = None
    position: float | None = None
    collapsible: bool | None = None
    collapsed: bool | None = None
    class_name: str | None = None
    link: dict[str, Any] | None = None
    custom_props: dict[str, Any] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)


def find_category_metadata_file(category_dir: Path) -> Path | None:
    """Return the first existing metadata file in a directory, if any."""
    for ext in CATEGORY_METADATA_EXTENSIONS:
        file_path = category_dir / f"{CATEGORY_METADATA_FILENAME_BASE}{ext}"
        if file_path.is_file():
            return file_path
    return None


def read_category_metadata_file(category_dir: Path) -> CategoryMetadata | None:
    """Read the category metadata file of a directory.

    Extensions are checked in the order ``.json``, ``.yml``, ``.yaml``; the
    first file found wins. All of them are parsed as YAML.

    Args:
        category_dir: Directory that may hold a ``_category_`` file.

    Returns:
        The parsed metadata, or None when the directory has no such file.

    Raises:
        CategoryMetadataError: If the file exists but is malformed.
    """
    file_path = find_category_metadata_file(category_dir)
    if file_path is None:
        return None

    try:
        content = load_yaml(file_path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise CategoryMetadataError(file_path, str(e)) from e

    return validate_category_metadata(content, file_path)


def validate_category_metadata(content: Any, path: Path | str) -> CategoryMetadata:
    """Check parsed category metadata and convert it to CategoryMetadata."""
    if content is None:
        content = {}
    if not isinstance(content, dict):
        raise CategoryMetadataError(
            path, f"Expected a mapping, got {type(content).__name__}"
        )

    for key in _STRING_KEYS:
        if key in content and not isinstance(content[key], str):
            raise CategoryMetadataError(path, f"'{key}' must be a string")
    for key in _BOOL_KEYS:
        if key in content and not isinstance(content[key], bool):
            raise CategoryMetadataError(path, f"'{key}' must be a boolean")

    position = content.get("position")
    if position is not None and (
        isinstance(position, bool) or not isinstance(position, numbers.Real)
    ):
        raise CategoryMetadataError(path, "'position' must be a number")

    link = content.get("link")
    if link is not None and not isinstance(link, dict):
        raise CategoryMetadataError(path, "'link' must be a mapping or null")

    custom_props = content.get("customProps", {})
    if not isinstance(custom_props, dict):
        raise CategoryMetadataError(path, "'customProps' must be a mapping")

    return CategoryMetadata(
        path=str(path),
        label=content.get("label"),
        position=position,
        collapsible=content.get("collapsible"),
        collapsed=content.get("collapsed"),
        class_name=content.get("className"),
        link=link,
        custom_props=custom_props,
        extra={k: v for k, v in content.items() if k not in _KNOWN_KEYS},
    )
