import sys

from twobitchunker.cli import main

sys.exit(main())
