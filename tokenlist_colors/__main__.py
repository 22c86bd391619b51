import sys

from tokenlist_colors.cli import main

if __name__ == "__main__":
    sys.exit(main())
