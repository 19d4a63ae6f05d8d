"""Generate Docusaurus-style API sidebars from page descriptors."""

__version__ = "0.1.0"
