# main.py
import sys

from solgate.cli import main

if __name__ == "__main__":
    sys.exit(main())
