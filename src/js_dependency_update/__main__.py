"""Run the action: ``python -m js_dependency_update``."""

import sys

from js_dependency_update.main import main

if __name__ == "__main__":
    sys.exit(main())
