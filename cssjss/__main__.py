import sys

from cssjss.cli import main

sys.exit(main())
