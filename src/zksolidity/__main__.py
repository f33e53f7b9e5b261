import sys

from zksolidity.cli import main

sys.exit(main())
