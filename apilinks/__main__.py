"""Entry point for ``python -m apilinks``."""

from apilinks.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
