# music_status/slack.py
import random
import time
from dataclasses import asdict, dataclass
from typing import Optional

import requests

from .debug import debug_log
from .models import TrackInfo


SLACK_PROFILE_SET_URL = "https://slack.com/api/users.profile.set"

STATUS_TTL_SECONDS = 5 * 60
STATUS_TEXT_LIMIT = 100

MUSIC_EMOJI = (
    ":notes:",
    ":headphones:",
    ":control_knobs:",
    ":musical_score:",
    ":violin:",
    ":saxophone:",
    ":musical_keyboard:",
)
DEFAULT_EMOJI = MUSIC_EMOJI[0]

_HTTP = requests.Session()


class SlackUpdateError(Exception):
    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.error = error


@dataclass(frozen=True)
class SlackProfileStatus:
    status_text: str
    status_emoji: str
    status_expiration: int  # unix time


def pick_emoji(randomize: bool = True, rng=random) -> str:
    if not randomize:
        return DEFAULT_EMOJI
    return rng.choice(MUSIC_EMOJI)


def build_status(
    track: TrackInfo,
    emoji: str,
    now: Optional[float] = None,
    ttl_seconds: int = STATUS_TTL_SECONDS,
) -> SlackProfileStatus:
    if now is None:
        now = time.time()
    return SlackProfileStatus(
        status_text=f"{track.name} by {track.artist}"[:STATUS_TEXT_LIMIT],
        status_emoji=emoji,
        status_expiration=int(now) + ttl_seconds,
    )


def update_slack_status(
    token: str,
    status: SlackProfileStatus,
    session: Optional[requests.Session] = None,
) -> None:
    """
    https://api.slack.com/methods/users.profile.set

    Slack answers HTTP 200 for most failures, so the "ok" flag in the body is
    what decides success.
    """
    http = session or _HTTP
    debug_log(f"Slack status -> {status}")

    try:
        r = http.post(
            SLACK_PROFILE_SET_URL,
            headers={"Authorization": f"Bearer {token}"},
            json={"profile": asdict(status)},
            timeout=6,
        )
    except requests.RequestException as e:
        raise SlackUpdateError(f"failed to send status update: {e}") from e

    try:
        body = r.json()
    except ValueError as e:
        raise SlackUpdateError(
            f"could not parse Slack response (HTTP {r.status_code})"
        ) from e

    if not body.get("ok"):
        error = body.get("error")
        raise SlackUpdateError(f"Slack rejected status update: {error}", error=error)
