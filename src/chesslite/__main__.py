"""``python -m chesslite`` entry point."""

from __future__ import annotations

import sys

from chesslite.app import main

if __name__ == "__main__":
    sys.exit(main())
