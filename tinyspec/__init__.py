"""tinyspec: checklist-driven spec documents with a live progress dashboard."""

__version__ = "0.4.0"
