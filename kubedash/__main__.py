"""Allow ``python -m kubedash``."""

from kubedash.cli import main

if __name__ == "__main__":
    main()
