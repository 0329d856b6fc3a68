"""
Console entry script for uNivUSaver

Run from the repository root:
    python -m app.main

The installed package also provides the same loop as the `univsaver`
command.
"""

import sys

from univsaver.orchestrator import main

if __name__ == "__main__":
    sys.exit(main())
