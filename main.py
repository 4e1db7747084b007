#main.py
import sys

from music_status.cli import status_main


if __name__ == "__main__":
    sys.exit(status_main())
