"""Dream-to-vision-board pipeline."""

__version__ = "0.1.0"
