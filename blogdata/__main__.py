import sys

from blogdata.cli import main

sys.exit(main())
