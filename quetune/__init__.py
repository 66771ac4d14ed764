"""quetune: dual-pane terminal music queue."""

__version__ = "0.1.0"
