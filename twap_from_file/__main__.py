"""Allow running as `python -m twap_from_file`."""

import sys

from twap_from_file.cli import main

sys.exit(main())
