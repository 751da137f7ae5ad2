import sys

from depstat.cli import main

sys.exit(main())
