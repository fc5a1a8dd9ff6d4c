"""CLI entry point: python -m lpssim"""

import sys

from lpssim.cli import main

sys.exit(main())
