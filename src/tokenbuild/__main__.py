"""Entry point for `python -m tokenbuild`."""

from tokenbuild.cli import main

if __name__ == "__main__":
    main()
