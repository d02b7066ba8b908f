import sys

from mars_rover.cli import main

sys.exit(main())
