"""Main entry point when executing langcore as a package.

This allows running the package using python -m langcore.
"""

from langcore.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
