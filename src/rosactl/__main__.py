"""Allow running rosactl with python -m rosactl."""

import sys

from rosactl.cli import main

sys.exit(main())
