import pytest

from mjhelper.colors import (
    Color,
    num_risk_color,
    other_discard_alert_color,
    waits_count_color,
)

SEVERITY = [Color.FG_HI_CYAN, Color.FG_HI_YELLOW, Color.FG_HI_RED, Color.FG_RED]


def test_risk_thresholds():
    assert num_risk_color(0) is Color.FG_HI_CYAN
    assert num_risk_color(5) is Color.FG_HI_YELLOW
    assert num_risk_color(10) is Color.FG_HI_RED
    assert num_risk_color(15) is Color.FG_RED


def test_risk_color_monotone():
    risks = [x / 2 for x in range(0, 60)]
    levels = [SEVERITY.index(num_risk_color(r)) for r in risks]
    assert levels == sorted(levels)


def test_waits_thresholds_one_shanten():
    assert waits_count_color(1, 12.9) is Color.FG_HI_CYAN
    assert waits_count_color(1, 13) is Color.FG_HI_YELLOW
    assert waits_count_color(1, 18) is Color.FG_HI_YELLOW
    assert waits_count_color(1, 19) is Color.FG_HI_RED


@pytest.mark.parametrize("shanten", [0, 1, 2, 3])
def test_waits_color_monotone(shanten):
    levels = [SEVERITY.index(waits_count_color(shanten, w)) for w in range(0, 120)]
    assert levels == sorted(levels)


def test_deeper_shanten_needs_more_waits():
    for w in range(0, 120):
        shallow = SEVERITY.index(waits_count_color(2, w))
        deep = SEVERITY.index(waits_count_color(3, w))
        assert deep <= shallow


def test_tenpai_scales_waits_up():
    for w in range(0, 40):
        assert SEVERITY.index(waits_count_color(0, w)) >= SEVERITY.index(waits_count_color(1, w))


def test_discard_alert_by_rank():
    for suit in range(3):
        base = suit * 9
        assert [other_discard_alert_color(base + r) for r in range(9)] == [
            Color.FG_WHITE, Color.FG_WHITE, Color.FG_HI_YELLOW,
            Color.FG_HI_RED, Color.FG_HI_RED, Color.FG_HI_RED,
            Color.FG_HI_YELLOW, Color.FG_WHITE, Color.FG_WHITE,
        ]


def test_discard_alert_honors_white():
    assert {other_discard_alert_color(t) for t in range(27, 34)} == {Color.FG_WHITE}


def test_discard_alert_rejects_negative():
    with pytest.raises(ValueError):
        other_discard_alert_color(-1)


def test_wrap_uses_ansi_code():
    assert Color.FG_RED.wrap("x") == "\x1b[31mx\x1b[0m"