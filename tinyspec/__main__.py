import sys

from tinyspec.interface.specs_app import main

if __name__ == "__main__":
    sys.exit(main())
