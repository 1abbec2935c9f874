import sys

from marsweather.cli import main

sys.exit(main())
