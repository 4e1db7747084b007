# music_status/bridge.py
import json
import subprocess
from typing import List

from .debug import debug_log
from .models import TrackInfo


def run_jxa(script: str) -> str:
    """
    Run a JavaScript for Automation snippet through osascript and return its
    trimmed result. osascript appends a newline to the expression value.
    """
    args: List[str] = ["osascript", "-l", "JavaScript", "-e", script]
    debug_log(f"osascript: {script}")
    return subprocess.check_output(args, text=True, stderr=subprocess.PIPE).strip()


class MusicApp:
    """Handle to a scriptable media player, addressed by its display name."""

    def __init__(self, name: str):
        self.name = name
        self._ref = f"Application({json.dumps(name)})"

    def __repr__(self) -> str:
        return f"MusicApp({self.name!r})"

    def is_running(self) -> bool:
        return run_jxa(f"{self._ref}.running()") == "true"

    def player_state(self) -> str:
        return run_jxa(f"{self._ref}.playerState()")

    def current_track(self) -> TrackInfo:
        script = f'''
        var t = {self._ref}.currentTrack;
        JSON.stringify({{name: t.name(), artist: t.artist(), album: t.album()}});
        '''
        data = json.loads(run_jxa(script))
        return TrackInfo(
            name=data["name"],
            artist=data["artist"],
            album=data["album"],
        )


def open_application(name: str) -> MusicApp:
    # Application("X").id() fails when no application with that name is installed.
    run_jxa(f"Application({json.dumps(name)}).id()")
    return MusicApp(name)
