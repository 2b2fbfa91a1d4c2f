import pytest

from picker.ui_runtime.focus_effects import FadeScaleListener, focus_effect_for_distance


def test_focus_effect_is_identity_at_focus() -> None:
    effect = focus_effect_for_distance(0)
    assert effect.scale == pytest.approx(1.0)
    assert effect.alpha == pytest.approx(1.0)


def test_focus_effect_is_symmetric_and_saturates() -> None:
    half = focus_effect_for_distance(250)
    assert half == focus_effect_for_distance(-250)
    assert half.scale == pytest.approx(0.85)
    assert half.alpha == pytest.approx(0.65)
    far = focus_effect_for_distance(5000)
    assert far.scale == pytest.approx(0.7)
    assert far.alpha == pytest.approx(0.3)


def test_fade_scale_listener_tracks_latest_distance() -> None:
    listener = FadeScaleListener(falloff=100)
    listener.on_distance_to_focus_changed(-50)
    assert listener.last_distance == -50
    assert listener.effect.scale == pytest.approx(0.85)
