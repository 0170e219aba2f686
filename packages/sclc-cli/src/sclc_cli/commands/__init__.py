"""CLI command modules.

Standalone commands shipped next to the sclc driver.
"""

from __future__ import annotations

__all__: list[str] = []
