"""
PeerShare - Allows running as python -m peershare.

Created by orpheus497
"""

import sys

from .main import main

sys.exit(main())
