import json
import unittest

from music_status.models import (
    Off,
    Paused,
    Playing,
    PlayerState,
    Stopped,
    TrackInfo,
    status_for,
    status_from_dict,
    to_json,
)


class TestPlayerState(unittest.TestCase):
    def test_classify(self) -> None:
        self.assertIs(PlayerState.classify("stopped"), PlayerState.STOPPED)
        self.assertIs(PlayerState.classify("playing"), PlayerState.PLAYING)
        for raw in ("paused", "fast forwarding", "rewinding", "Stopped"):
            self.assertIs(PlayerState.classify(raw), PlayerState.OTHER)

    def test_status_for(self) -> None:
        track = TrackInfo("n", "a", "al")
        self.assertEqual(status_for(PlayerState.STOPPED), Stopped())
        self.assertEqual(status_for(PlayerState.PLAYING, track), Playing(track))
        self.assertEqual(status_for(PlayerState.OTHER, track), Paused(track))

    def test_status_for_requires_track(self) -> None:
        with self.assertRaises(ValueError):
            status_for(PlayerState.PLAYING)


class TestStatusSerialization(unittest.TestCase):
    def test_json_keeps_non_ascii(self) -> None:
        status = Playing(TrackInfo("Jóga", "Björk", "Homogenic"))
        text = to_json(status)
        self.assertIn("Björk", text)
        self.assertEqual(json.loads(text)["name"], "Jóga")

    def test_from_dict(self) -> None:
        self.assertEqual(status_from_dict({"type": "Off"}), Off())
        self.assertEqual(status_from_dict({"type": "Stopped"}), Stopped())
        self.assertEqual(
            status_from_dict({"type": "Paused", "name": "n", "artist": "a", "album": "al"}),
            Paused(TrackInfo("n", "a", "al")),
        )

    def test_from_dict_rejects_unknown_type(self) -> None:
        with self.assertRaises(ValueError):
            status_from_dict({"type": "Buffering"})
        with self.assertRaises(ValueError):
            status_from_dict({})

    def test_from_dict_rejects_non_object(self) -> None:
        for data in ([], "Playing", None, 3):
            with self.subTest(data=data):
                with self.assertRaises(ValueError):
                    status_from_dict(data)

    def test_compact_json(self) -> None:
        self.assertEqual(to_json(Off()), '{"type":"Off"}')
        self.assertEqual(
            to_json(Paused(TrackInfo("n", "a", "al"))),
            '{"type":"Paused","name":"n","artist":"a","album":"al"}',
        )

    def test_from_dict_rejects_missing_track_field(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            status_from_dict({"type": "Playing", "name": "n", "artist": "a"})
        self.assertIn("album", str(ctx.exception))
