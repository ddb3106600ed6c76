import sys

from line_sorter.cli import main

sys.exit(main())
