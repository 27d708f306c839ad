import pytest

from mediamenu.domain import PlayerChoice
from mediamenu.errors import NoPlayerAvailable
from mediamenu.locator import PLAYER_PRIORITY, locate


def resolver_for(*installed):
    queried = []

    def resolve(name):
        queried.append(name)
        return f"/usr/bin/{name}" if name in installed else None

    resolve.queried = queried
    return resolve


def test_priority_order_is_mpv_mplayer_vlc_ffplay():
    assert [p.value for p in PLAYER_PRIORITY] == ["mpv", "mplayer", "vlc", "ffplay"]


def test_first_available_wins():
    assert locate(resolver_for("vlc", "mplayer", "ffplay")) is PlayerChoice.MPLAYER


def test_stops_probing_after_first_match():
    resolve = resolver_for("mpv", "vlc")
    assert locate(resolve) is PlayerChoice.MPV
    assert resolve.queried == ["mpv"]


def test_falls_through_to_ffplay():
    assert locate(resolver_for("ffplay")) is PlayerChoice.FFPLAY


def test_no_player_raises():
    resolve = resolver_for()
    with pytest.raises(NoPlayerAvailable) as exc:
        locate(resolve)
    assert exc.value.candidates == ["mpv", "mplayer", "vlc", "ffplay"]
    assert resolve.queried == ["mpv", "mplayer", "vlc", "ffplay"]


def test_preferred_player_is_tried_first():
    assert locate(resolver_for("mpv", "vlc"), preferred="vlc") is PlayerChoice.VLC


def test_missing_preferred_player_falls_back_to_priority():
    assert locate(resolver_for("mpv"), preferred="ffplay") is PlayerChoice.MPV


def test_unknown_preferred_player_is_ignored():
    assert locate(resolver_for("mplayer"), preferred="winamp") is PlayerChoice.MPLAYER
