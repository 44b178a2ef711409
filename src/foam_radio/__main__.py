import sys

from foam_radio.cli import main

sys.exit(main())
