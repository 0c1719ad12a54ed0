"""Run the status summary CLI with ``python -m status_summary``."""

import sys

from status_summary.cli import main

sys.exit(main())
