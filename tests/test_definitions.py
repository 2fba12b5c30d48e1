import pytest

from girderworks.definitions import (
    VOLUME,
    MenuResult,
    SceneResult,
    VolumeSettings,
)


@pytest.mark.parametrize(
    "value, expected",
    [(-1, SceneResult.ONGOING), (2, SceneResult.LOST), (37, SceneResult.WIN)],
)
def test_scene_results_by_value(value, expected):
    assert SceneResult(value) is expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (2, MenuResult.START_GAME),
        (3, MenuResult.SETTINGS),
        (4, MenuResult.EXIT_GAME),
        (5, MenuResult.RESTART),
    ],
)
def test_menu_results_by_value(value, expected):
    assert MenuResult(value) is expected


def test_menu_results_share_main_menu_and_exit():
    assert MenuResult(4) is MenuResult.MAIN_MENU


def test_volume_defaults_to_full():
    settings = VolumeSettings()
    assert settings.sound == 100
    assert settings.music == 100
    assert VOLUME == settings


def test_volume_accepts_bounds():
    settings = VolumeSettings(sound=0, music=100)
    assert (settings.sound, settings.music) == (0, 100)


@pytest.mark.parametrize("kwargs", [{"sound": 101}, {"music": -1}])
def test_volume_out_of_range_is_rejected(kwargs):
    with pytest.raises(ValueError):
        VolumeSettings(**kwargs)