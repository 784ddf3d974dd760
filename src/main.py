"""Run script.

Why it exists:
- Allows running the CLI with `python -m main` during development.
- Keeps a simple entrypoint alongside the `pokecards` console script.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8);
# card names and labels are not ASCII-only.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
