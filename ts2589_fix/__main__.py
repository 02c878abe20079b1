import sys

from ts2589_fix.cli import main

sys.exit(main())
