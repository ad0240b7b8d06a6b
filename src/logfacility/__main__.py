"""Allow running as ``python -m logfacility``."""

import sys

from logfacility.cli import main

sys.exit(main())
