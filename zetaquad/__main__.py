import sys

from zetaquad.runner import main

sys.exit(main())
