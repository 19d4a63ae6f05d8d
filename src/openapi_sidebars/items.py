"""Page descriptor loading from JSON or YAML files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from openapi_sidebars.config.load import load_yaml
from openapi_sidebars.models import ApiInfo, ApiItem, ApiMetadata, InfoItem, Item

_REQUIRED_FIELDS = ("title", "permalink", "id", "source")


def load_items(items_path: Path) -> list[Item]:
    """Load page descriptors from a file.

    ``.json`` files are read with the json module; anything else is parsed
    as YAML.

    Args:
        items_path: Path to the descriptor file.

    Returns:
        Parsed descriptors, in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file content is not a valid descriptor list.
    """
    if not items_path.exists():
        raise FileNotFoundError(f"Items file not found: {items_path}")

    with open(items_path, encoding="utf-8") as f:
        if items_path.suffix == ".json":
            try:
                raw = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {items_path}: {e}") from e
        else:
            raw = load_yaml(f)

    return parse_items(raw)


def parse_items(raw: Any) -> list[Item]:
    """Parse a list of raw descriptors.

    Accepts either a list or a mapping with an ``items`` list.
    """
    if isinstance(raw, dict) and "items" in raw:
        raw = raw["items"]
    if not isinstance(raw, list):
        raise ValueError(
            f"Items must be a list of descriptors, got {type(raw).__name__}"
        )
    return [parse_item(entry, index) for index, entry in enumerate(raw)]


def parse_item(raw: Any, index: int = 0) -> Item:
    """Parse one raw descriptor mapping into an InfoItem or ApiItem."""
    if not isinstance(raw, dict):
        raise ValueError(f"Item {index} must be a mapping, got {type(raw).__name__}")

    for key in _REQUIRED_FIELDS:
        if not isinstance(raw.get(key), str):
            raise ValueError(f"Item {index} field {key!r} must be a string")

    source_dir_name = raw.get("sourceDirName", ".")
    if not isinstance(source_dir_name, str):
        raise ValueError(f"Item {index} field 'sourceDirName' must be a string")

    item_type = raw.get("type")
    if item_type == "info":
        return InfoItem(
            title=raw["title"],
            permalink=raw["permalink"],
            id=raw["id"],
            source=raw["source"],
            source_dir_name=source_dir_name,
        )
    if item_type == "api":
        return ApiItem(
            title=raw["title"],
            permalink=raw["permalink"],
            id=raw["id"],
            source=raw["source"],
            source_dir_name=source_dir_name,
            api=_parse_api(raw.get("api"), index),
        )
    raise ValueError(
        f"Item {index} has unknown type {item_type!r} (expected 'info' or 'api')"
    )


def _parse_api(raw: Any, index: int) -> ApiMetadata:
    """Parse the ``api`` block of an API descriptor."""
    if raw is None:
        return ApiMetadata()
    if not isinstance(raw, dict):
        raise ValueError(f"Item {index} field 'api' must be a mapping")

    info = None
    raw_info = raw.get("info")
    if raw_info is not None:
        if not isinstance(raw_info, dict):
            raise ValueError(f"Item {index} field 'api.info' must be a mapping")
        title = raw_info.get("title")
        if title is not None and not isinstance(title, str):
            raise ValueError(f"Item {index} field 'api.info.title' must be a string")
        info = ApiInfo(title=title)

    tags = raw.get("tags")
    if tags is not None:
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise ValueError(
                f"Item {index} field 'api.tags' must be a list of strings"
            )

    deprecated = raw.get("deprecated", False)
    if deprecated is None:
        deprecated = False
    if not isinstance(deprecated, bool):
        raise ValueError(f"Item {index} field 'api.deprecated' must be a boolean")

    return ApiMetadata(info=info, tags=tags, deprecated=deprecated)
