"""Sidebar options loading and resolution."""

from openapi_sidebars.config.load import load_options
from openapi_sidebars.config.model import SidebarOptions

__all__ = ["SidebarOptions", "load_options"]
