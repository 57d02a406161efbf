import sys

from star_catcher.game import main


if __name__ == "__main__":
    sys.exit(main())
