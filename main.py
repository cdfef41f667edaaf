import sys

from knightqueen.app import main

if __name__ == '__main__':
    sys.exit(main())
