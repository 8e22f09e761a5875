import sys

from tickgrid.main import main

sys.exit(main())
