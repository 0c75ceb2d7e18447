import sys

from classic_snake.cli import main

sys.exit(main())
