import sys

from polyline.cli import main

sys.exit(main())
