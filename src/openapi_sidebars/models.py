"""Page descriptor and sidebar node models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal, NotRequired, TypedDict, TypeGuard, Union


@dataclass
class ApiInfo:
    """Top-level info block of the API a page was generated from."""

    title: str | None = None


@dataclass
class ApiMetadata:
    """Operation metadata attached to an API page."""

    info: ApiInfo | None = None
    tags: list[str] | None = None
    deprecated: bool = False


@dataclass
class InfoItem:
    """Introductory page of an API (not an endpoint)."""

    type: ClassVar[Literal["info"]] = "info"

    title: str
    permalink: str
    id: str
    source: str
    source_dir_name: str = "."


@dataclass
class ApiItem:
    """Page describing a single API operation."""

    type: ClassVar[Literal["api"]] = "api"

    title: str
    permalink: str
    id: str
    source: str
    source_dir_name: str = "."
    api: ApiMetadata = field(default_factory=ApiMetadata)


Item = Union[InfoItem, ApiItem]


def is_api_item(item: Item) -> TypeGuard[ApiItem]:
    return item.type == "api"


def is_info_item(item: Item) -> TypeGuard[InfoItem]:
    return item.type == "info"


class SidebarLinkDict(TypedDict):
    """Dictionary representation of a sidebar link."""

    type: Literal["link"]
    label: str
    href: str
    docId: str
    className: NotRequired[str]


class SidebarCategoryDict(TypedDict):
    """Dictionary representation of a sidebar category."""

    type: Literal["category"]
    label: str
    collapsible: bool
    collapsed: bool
    items: list[SidebarLinkDict | SidebarCategoryDict]


@dataclass
class SidebarLink:
    """Leaf node pointing at one page."""

    type: ClassVar[Literal["link"]] = "link"

    label: str
    href: str
    doc_id: str
    class_name: str | None = None

    def to_dict(self) -> SidebarLinkDict:
        """Convert to dictionary for JSON serialization."""
        result: SidebarLinkDict = {
            "type": self.type,
            "label": self.label,
            "href": self.href,
            "docId": self.doc_id,
        }
        if self.class_name is not None:
            result["className"] = self.class_name
        return result


@dataclass
class SidebarCategory:
    """Named group of sidebar nodes."""

    type: ClassVar[Literal["category"]] = "category"

    label: str
    collapsible: bool
    collapsed: bool
    items: list[SidebarItem] = field(default_factory=list)

    def to_dict(self) -> SidebarCategoryDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type,
            "label": self.label,
            "collapsible": self.collapsible,
            "collapsed": self.collapsed,
            "items": [item.to_dict() for item in self.items],
        }


SidebarItem = Union[SidebarLink, SidebarCategory]


def sidebar_to_dicts(
    items: list[SidebarItem],
) -> list[SidebarLinkDict | SidebarCategoryDict]:
    """Convert a whole sidebar to plain dictionaries."""
    return [item.to_dict() for item in items]
