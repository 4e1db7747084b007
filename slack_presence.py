#slack_presence.py
# Run from cron/launchd every few minutes; the status expires on its own.
import sys

from music_status.cli import slack_main


if __name__ == "__main__":
    sys.exit(slack_main())
