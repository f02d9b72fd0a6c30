"""Module entrypoint for running casekit as ``python -m casekit``."""

from __future__ import annotations

from casekit.cli import main


if __name__ == "__main__":
    main()
