"""Sidebar generation from API page descriptors.

Pages are grouped by the specification file they were generated from, then
by tag. When several specification files are present, each one becomes a
category and the categories are nested following the files' directories.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass

from openapi_sidebars.config import SidebarOptions
from openapi_sidebars.models import (
    ApiItem,
    Item,
    SidebarCategory,
    SidebarItem,
    SidebarLink,
    is_api_item,
    is_info_item,
)

DEPRECATED_CLASS_NAME = "menu__list-item--deprecated"
UNTAGGED_LABEL = "API"
ROOT_DIR_NAME = "."


@dataclass
class _Section:
    """Category generated for one source file, with its directory."""

    source_dir_name: str
    category: SidebarCategory


def generate_sidebars(items: list[Item], options: SidebarOptions) -> list[SidebarItem]:
    """Build the sidebar for a list of page descriptors.

    Args:
        items: Page descriptors, possibly from several source files.
        options: Collapse behaviour for generated categories.

    Returns:
        Top-level sidebar nodes. A single source file yields its grouped
        items directly; several yield one category per source, with
        sources outside the root nested under directory categories.
    """
    sections = [
        _build_section(source, source_items, options)
        for source, source_items in _group_by_source(items).items()
    ]

    if len(sections) == 1:
        return sections[0].category.items

    root_sections: list[SidebarItem] = [
        section.category
        for section in sections
        if section.source_dir_name == ROOT_DIR_NAME
    ]
    sub_categories: list[SidebarItem] = []

    for section in sections:
        if section.source_dir_name == ROOT_DIR_NAME:
            continue
        level = sub_categories
        for dir_name in section.source_dir_name.split("/"):
            existing = _find_category(level, dir_name)
            if existing is None:
                existing = SidebarCategory(
                    label=dir_name,
                    collapsible=options.sidebar_collapsible,
                    collapsed=options.sidebar_collapsed,
                )
                level.append(existing)
            level = existing.items
        level.append(section.category)

    return [*root_sections, *sub_categories]


def group_by_tags(items: list[Item], options: SidebarOptions) -> list[SidebarItem]:
    """Group the pages of one source file into intros, tags and a catch-all.

    Info pages become top-level links. Each distinct tag, in order of first
    appearance, becomes a category of the operations carrying it. Operations
    without tags land in a trailing "API" category, which is always present.
    """
    intros: list[SidebarItem] = [
        SidebarLink(label=item.title, href=item.permalink, doc_id=item.id)
        for item in items
        if is_info_item(item)
    ]
    api_items = [item for item in items if is_api_item(item)]

    # dict keeps first-seen order
    tags = list(
        dict.fromkeys(tag for item in api_items for tag in item.api.tags or () if tag)
    )

    tagged: list[SidebarItem] = []
    for tag in tags:
        category = SidebarCategory(
            label=tag,
            collapsible=options.sidebar_collapsible,
            collapsed=options.sidebar_collapsed,
            items=[
                _api_link(item) for item in api_items if tag in (item.api.tags or ())
            ],
        )
        if category.items:
            tagged.append(category)

    untagged = SidebarCategory(
        label=UNTAGGED_LABEL,
        collapsible=options.sidebar_collapsible,
        collapsed=options.sidebar_collapsed,
        items=[_api_link(item) for item in api_items if not item.api.tags],
    )

    return [*intros, *tagged, untagged]


def _group_by_source(items: list[Item]) -> dict[str, list[Item]]:
    """Partition descriptors by source file, keeping first-seen order."""
    groups: dict[str, list[Item]] = {}
    for item in items:
        groups.setdefault(item.source, []).append(item)
    return groups


def _build_section(
    source: str, items: list[Item], options: SidebarOptions
) -> _Section:
    """Wrap the grouped pages of one source file in a category."""
    prototype = next(
        (item for item in items if is_api_item(item) and item.api.info is not None),
        None,
    )
    title = None
    source_dir_name = ROOT_DIR_NAME
    if prototype is not None and prototype.api.info is not None:
        source_dir_name = prototype.source_dir_name
        title = prototype.api.info.title

    file_name = posixpath.basename(source).split(".")[0]

    return _Section(
        source_dir_name=source_dir_name,
        category=SidebarCategory(
            label=title or file_name,
            collapsible=options.sidebar_collapsible,
            collapsed=options.sidebar_collapsed,
            items=group_by_tags(items, options),
        ),
    )


def _find_category(items: list[SidebarItem], label: str) -> SidebarCategory | None:
    """Return the first category in items with the given label."""
    for item in items:
        if isinstance(item, SidebarCategory) and item.label == label:
            return item
    return None


def _api_link(item: ApiItem) -> SidebarLink:
    return SidebarLink(
        label=item.title,
        href=item.permalink,
        doc_id=item.id,
        class_name=DEPRECATED_CLASS_NAME if item.api.deprecated else None,
    )
