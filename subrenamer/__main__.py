import sys

from .renamer import main

sys.exit(main())
