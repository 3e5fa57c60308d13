from __future__ import annotations

from listing_audit.entrypoints.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
