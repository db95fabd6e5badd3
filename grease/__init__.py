"""grease: create and update GitHub releases and upload their assets."""

__version__ = "0.3.0"
