import sys

from gridtactics.cli import main

sys.exit(main())
