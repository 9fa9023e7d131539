"""Allow running as ``python -m fwharden``."""

import sys

from .main import main

sys.exit(main())
