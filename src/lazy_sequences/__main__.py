"""Allow running the demos with ``python -m lazy_sequences``."""

import sys

from .main import main

sys.exit(main())
