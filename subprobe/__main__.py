"""Allow running SUBPROBE with ``python -m subprobe``."""

import sys

from subprobe.cli import main

sys.exit(main())
