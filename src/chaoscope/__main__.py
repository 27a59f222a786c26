import sys

from chaoscope.cli import main

sys.exit(main())
