import sys

from pgnreplay.app import main

sys.exit(main())
