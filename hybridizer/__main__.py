import sys

from .cli.make_hybrid import main

sys.exit(main())
