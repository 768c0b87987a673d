# 🖥️ price_preview/cli/__init__.py
"""🖥️ Командний рядок та термінальний рендерер."""

from .main import main
from .table_renderer import TableRenderer

__all__ = ["TableRenderer", "main"]
