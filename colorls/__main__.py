"""Module entrypoint for ``python -m colorls``."""

from .cli import main


if __name__ == "__main__":
    main()
