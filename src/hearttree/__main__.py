# -*- coding: utf-8 -*-
"""Allow ``python -m hearttree``."""
import sys

from .cli import main

sys.exit(main())
