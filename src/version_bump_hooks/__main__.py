"""Allow running as ``python -m version_bump_hooks``."""

from version_bump_hooks.cli import main

if __name__ == "__main__":
    main()
