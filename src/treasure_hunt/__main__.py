"""Allow `python -m treasure_hunt`."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
