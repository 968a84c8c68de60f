"""Allow running as ``python -m highlight_cli``."""

import sys

from highlight_cli.cli import main

sys.exit(main())
