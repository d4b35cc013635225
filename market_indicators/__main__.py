"""Allow running as ``python -m market_indicators``."""

import sys

from market_indicators.cli import main

sys.exit(main())
