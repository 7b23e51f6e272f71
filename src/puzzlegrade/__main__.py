"""Allow ``python -m puzzlegrade``."""

import sys

from puzzlegrade.cli import main

sys.exit(main())
