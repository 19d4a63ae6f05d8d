"""Docusaurus plugin configuration helpers."""

from __future__ import annotations

from typing import Any

PLUGIN_NAME = "docusaurus-plugin-openapi"


def get_plugin_options(raw: dict[str, Any]) -> dict[str, Any] | None:
    """Extract the openapi plugin options from a site config's plugins.

    Three entry styles are recognized in the list form:

        plugins:
          - docusaurus-plugin-openapi
          - [docusaurus-plugin-openapi, {sidebarCollapsed: false}]
          - docusaurus-plugin-openapi:
              sidebarCollapsed: false

    Mapping form:
        plugins:
          docusaurus-plugin-openapi:
            sidebarCollapsed: false

    Returns None when the plugin is not configured.
    """
    plugins = raw.get("plugins")
    if plugins is None:
        return None

    if isinstance(plugins, dict):
        if PLUGIN_NAME in plugins:
            options = plugins[PLUGIN_NAME]
            # Plugin with no options is represented as empty dict or None
            return options if isinstance(options, dict) else {}
        return None

    if not isinstance(plugins, list):
        raise ValueError(
            f"'plugins' must be a list or mapping, got {type(plugins).__name__}"
        )

    for plugin in plugins:
        if plugin == PLUGIN_NAME:
            return {}
        if isinstance(plugin, dict) and PLUGIN_NAME in plugin:
            options = plugin[PLUGIN_NAME]
            return options if isinstance(options, dict) else {}
        if isinstance(plugin, list) and plugin and plugin[0] == PLUGIN_NAME:
            options = plugin[1] if len(plugin) > 1 else None
            return options if isinstance(options, dict) else {}
    return None
