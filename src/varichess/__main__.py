"""Allow ``python -m varichess``."""

import sys

from varichess.app import main

sys.exit(main())
