"""Module entrypoint for running voicematch as ``python -m voicematch``."""

from __future__ import annotations

from voicematch.cli import main


if __name__ == "__main__":
    main()
