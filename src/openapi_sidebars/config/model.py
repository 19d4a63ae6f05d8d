"""Sidebar options model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Plugin option keys, as spelled in the Docusaurus config
OPTION_KEYS = {
    "sidebarCollapsible": "sidebar_collapsible",
    "sidebarCollapsed": "sidebar_collapsed",
}


@dataclass
class SidebarOptions:
    """Collapse behaviour applied to every generated category.

    Attributes:
        sidebar_collapsible: Whether categories can be collapsed.
        sidebar_collapsed: Whether categories start out collapsed.
    """

    sidebar_collapsible: bool = True
    sidebar_collapsed: bool = True

    @classmethod
    def from_mapping(cls, raw: dict[str, Any], strict: bool = True) -> SidebarOptions:
        """Build options from a mapping of plugin option keys.

        Args:
            raw: Mapping of option keys to values.
            strict: If False, keys other than the sidebar options are skipped
                (a plugin entry also carries its other settings).

        Raises:
            ValueError: On unknown keys (when strict) or non-boolean values.
        """
        values: dict[str, bool] = {}
        for key, value in raw.items():
            if key not in OPTION_KEYS:
                if not strict:
                    continue
                known = ", ".join(OPTION_KEYS)
                raise ValueError(f"Unknown sidebar option {key!r} (expected: {known})")
            if not isinstance(value, bool):
                raise ValueError(
                    f"Sidebar option {key!r} must be a boolean, "
                    f"got {type(value).__name__}"
                )
            values[OPTION_KEYS[key]] = value
        return cls(**values)
