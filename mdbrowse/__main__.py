"""Module entrypoint for ``python -m mdbrowse``."""

from .cli import main


if __name__ == "__main__":
    main()
