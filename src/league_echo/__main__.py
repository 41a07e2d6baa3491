import sys

from league_echo.cli import main

sys.exit(main())
