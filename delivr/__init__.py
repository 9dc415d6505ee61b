"""delivr - configuration resolution and build output detection for release tooling."""

__version__ = "0.4.0"
