"""Allow running as ``python -m perlinicon``."""

from perlinicon.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
