"""Entry point for ``python -m mars_rovers``."""

from .cli import main_entry

if __name__ == "__main__":
    main_entry()
