"""Allow ``python -m ivarith``."""

import sys

from .cli import main

sys.exit(main())
