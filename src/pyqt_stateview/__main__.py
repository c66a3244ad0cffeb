import sys

from pyqt_stateview.demo.app import main

if __name__ == "__main__":
    sys.exit(main())
