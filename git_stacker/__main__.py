import sys

from git_stacker.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
