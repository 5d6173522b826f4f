"""Development entrypoint for a Hex Dice self-play match."""

from __future__ import annotations

from hexdice.main import main

if __name__ == "__main__":
    raise SystemExit(main())
