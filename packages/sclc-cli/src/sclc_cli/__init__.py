"""sclc-cli: Command-line interface for the sclc compiler driver."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
