"""Allow ``python -m camparams``."""

from __future__ import annotations

import sys

from camparams.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
