import sys

from chessconsole.app import main

sys.exit(main())
