"""Remote model catalogs that can be merged into the bundled one."""

from __future__ import annotations

from .huggingface import HuggingFaceCatalog

__all__ = ["HuggingFaceCatalog"]
