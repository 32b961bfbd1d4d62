import sys

from airly.cli import main

sys.exit(main())
