import sys

from goal_priorities.cli import main

if __name__ == "__main__":
    sys.exit(main())
