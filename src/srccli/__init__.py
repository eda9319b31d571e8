"""srccli: Sourcegraph command-line helpers."""

__version__ = "0.3.0"
