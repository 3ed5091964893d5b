"""Allow `python -m pong`."""
import sys

from pong.main import main

sys.exit(main())
