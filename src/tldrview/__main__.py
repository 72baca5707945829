"""tldrview executable module.

Error handling lives in cli.main(); this module only serves `python -m tldrview`
and delegates to the same entry point as the installed console script.
"""

from __future__ import annotations

import sys

from .cli import main


if __name__ == "__main__":
    sys.exit(main())
