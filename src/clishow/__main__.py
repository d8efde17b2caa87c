"""Entry point for ``python -m clishow``."""

from clishow.cli import main

if __name__ == "__main__":
    main()
