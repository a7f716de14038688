"""Allow ``python -m pointbench``."""

import sys

from pointbench.cli import main

sys.exit(main())
