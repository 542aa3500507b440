"""Allow ``python -m rdmd``."""

from rdmd.cli import cli_main

if __name__ == "__main__":
    cli_main()
