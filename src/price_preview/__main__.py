# 🚀 price_preview/__main__.py
"""🚀 `python -m price_preview`."""

from price_preview.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
