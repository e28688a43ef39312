"""fxdeps - resolve JavaFX modules into platform-specific Maven coordinates."""

__version__ = "0.1.0"
