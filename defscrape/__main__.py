"""defscrape entry point"""

import sys

from defscrape.cli import main

if __name__ == "__main__":
    sys.exit(main())
