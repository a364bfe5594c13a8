"""Allow running with ``python -m driver_resolver``."""

import sys

from driver_resolver.main import main

sys.exit(main())
