"""Allow running as python -m ssdwear."""

import sys

from ssdwear.cli import main

sys.exit(main())
