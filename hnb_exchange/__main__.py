"""Entry point for ``python -m hnb_exchange``."""

from __future__ import annotations

import sys

from hnb_exchange.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
