"""Console script entry point.

Why it exists:
- Target of the `letscrate` script declared in pyproject.toml.
- Keeps a simple entrypoint besides `python -m letscrate`.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8);
# crate and file names are arbitrary unicode.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from letscrate.cli.main import app


def main() -> None:
    app(prog_name="letscrate")


if __name__ == "__main__":
    main()
