# music_status/cli.py
import argparse
import json
import os
import subprocess
import sys

from .debug import debug_log
from .models import Off, Paused, Playing, Stopped, status_from_dict, to_json
from .query import ApplicationUnavailable, run
from .slack import SlackUpdateError, build_status, pick_emoji, update_slack_status


def status_main() -> int:
    print(to_json(run()))
    return 0


def _osascript_stderr(error: BaseException) -> str:
    # ApplicationUnavailable keeps the osascript failure as its __cause__.
    for e in (error, error.__cause__):
        stderr = getattr(e, "stderr", None)
        if stderr:
            return stderr.strip()
    return ""


def _read_status(from_json: bool):
    if from_json:
        return status_from_dict(json.loads(sys.stdin.read()))
    return run()


def slack_main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="slack-music-status",
        description="Set your Slack status to the song playing in Music.app",
    )
    parser.add_argument('--slack-secret-token',
                        default=os.getenv("SLACK_SECRET_TOKEN"),
                        help='Slack OAuth access token (default: $SLACK_SECRET_TOKEN)')
    parser.add_argument('--no-randomize-emoji', action='store_true',
                        help="Don't change the status emoji on each run")
    parser.add_argument('--from-json', action='store_true',
                        help='Read a status payload from stdin instead of asking the player')

    args = parser.parse_args(argv)
    if not args.slack_secret_token:
        parser.error("--slack-secret-token or SLACK_SECRET_TOKEN is required")

    debug_log(f"no_randomize_emoji={args.no_randomize_emoji}")

    try:
        status = _read_status(args.from_json)
    except (ApplicationUnavailable, subprocess.CalledProcessError, KeyError, ValueError) as e:
        detail = _osascript_stderr(e)
        debug_log(f"Error fetching song: {e!r} stderr={detail!r}")
        print(f"[Music] {e}" + (f": {detail}" if detail else ""))
        return 1

    if isinstance(status, Playing):
        emoji = pick_emoji(randomize=not args.no_randomize_emoji)
        profile = build_status(status.track, emoji)
        try:
            update_slack_status(args.slack_secret_token, profile)
        except SlackUpdateError as e:
            debug_log(f"Slack update failed: {e!r}")
            print(f"[Slack] Update failed: {e}")
            return 1
        print(f"[Slack] Updated: {profile.status_text} {profile.status_emoji}")
    elif isinstance(status, Paused):
        print(f"[Music] Paused: {status.track.name} — {status.track.artist}")
    elif isinstance(status, Stopped):
        print("[Music] No song currently selected")
    elif isinstance(status, Off):
        print("[Music] Music app not running")

    return 0
