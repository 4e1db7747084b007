# music_status/models.py
import json
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class PlayerState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    OTHER = "other"

    @classmethod
    def classify(cls, raw: str) -> "PlayerState":
        """
        Only the literal "stopped" and "playing" are recognised. Anything else
        (paused, fast forwarding, rewinding...) is OTHER and reported as Paused.
        """
        if raw == "stopped":
            return cls.STOPPED
        if raw == "playing":
            return cls.PLAYING
        return cls.OTHER


@dataclass(frozen=True)
class TrackInfo:
    name: str
    artist: str
    album: str


@dataclass(frozen=True)
class Off:
    def to_dict(self) -> dict:
        return {"type": "Off"}


@dataclass(frozen=True)
class Stopped:
    def to_dict(self) -> dict:
        return {"type": "Stopped"}


@dataclass(frozen=True)
class Playing:
    track: TrackInfo

    def to_dict(self) -> dict:
        return {
            "type": "Playing",
            "name": self.track.name,
            "artist": self.track.artist,
            "album": self.track.album,
        }


@dataclass(frozen=True)
class Paused:
    track: TrackInfo

    def to_dict(self) -> dict:
        return {
            "type": "Paused",
            "name": self.track.name,
            "artist": self.track.artist,
            "album": self.track.album,
        }


StatusPayload = Union[Off, Stopped, Playing, Paused]


def status_for(state: PlayerState, track: Optional[TrackInfo] = None) -> StatusPayload:
    if state is PlayerState.STOPPED:
        return Stopped()
    if track is None:
        raise ValueError(f"{state.name} status needs a track")
    if state is PlayerState.PLAYING:
        return Playing(track)
    return Paused(track)


def to_json(status: StatusPayload) -> str:
    # Compact, the same bytes JSON.stringify prints.
    return json.dumps(status.to_dict(), ensure_ascii=False, separators=(",", ":"))


def status_from_dict(data: dict) -> StatusPayload:
    if not isinstance(data, dict):
        raise ValueError(f"status payload must be an object, got {type(data).__name__}")

    kind = data.get("type")
    if kind == "Off":
        return Off()
    if kind == "Stopped":
        return Stopped()
    if kind not in ("Playing", "Paused"):
        raise ValueError(f"unknown status type: {kind!r}")

    try:
        track = TrackInfo(
            name=data["name"],
            artist=data["artist"],
            album=data["album"],
        )
    except KeyError as e:
        raise ValueError(f"{kind} status is missing {e.args[0]!r}") from e

    return Playing(track) if kind == "Playing" else Paused(track)
