"""Parse a comprehensive rules document and render it as static HTML pages."""

__version__ = "0.1.0"