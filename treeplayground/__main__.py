"""Run the playground demo: ``python -m treeplayground``."""

import sys

from .demo import main

sys.exit(main())
