import sys

from neuroscan.cli import main

sys.exit(main())
