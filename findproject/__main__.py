"""Allow ``python -m findproject``."""

import sys

from .cli import main

sys.exit(main())
