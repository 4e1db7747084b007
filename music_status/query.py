# music_status/query.py
from typing import Callable, Optional, Sequence, Tuple

from .bridge import MusicApp, open_application
from .debug import debug_log
from .models import Off, PlayerState, StatusPayload, status_for


# Music replaced iTunes on macOS 10.15; older systems only have iTunes.
CANDIDATE_APPLICATIONS: Tuple[str, ...] = ("Music", "iTunes")


class ApplicationUnavailable(Exception):
    def __init__(self, candidates: Sequence[str]):
        self.candidates = tuple(candidates)
        super().__init__(
            "No scriptable music application found (tried: "
            + ", ".join(self.candidates)
            + ")"
        )


def resolve_application(
    candidates: Sequence[str],
    opener: Callable[[str], MusicApp] = open_application,
) -> Tuple[Optional[MusicApp], Optional[Exception]]:
    """
    Try each candidate in order and return the first handle that opens,
    together with the last error seen. The handle is None if all failed.
    """
    last_error: Optional[Exception] = None
    for name in candidates:
        try:
            app = opener(name)
        except Exception as e:
            debug_log(f"Could not open {name}: {e}")
            last_error = e
            continue
        return app, last_error
    return None, last_error


def run(
    opener: Callable[[str], MusicApp] = open_application,
    candidates: Sequence[str] = CANDIDATE_APPLICATIONS,
) -> StatusPayload:
    app, error = resolve_application(candidates, opener)
    if app is None:
        raise ApplicationUnavailable(candidates) from error

    if not app.is_running():
        return Off()

    state = PlayerState.classify(app.player_state())
    if state is PlayerState.STOPPED:
        return status_for(state)

    return status_for(state, app.current_track())
