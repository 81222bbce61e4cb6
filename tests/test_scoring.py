import pytest

from tetris_scoring import drop_interval_ms, level_for, score_for


@pytest.mark.parametrize("lines,level,points", [
    (1, 1, 40), (4, 1, 1200), (0, 3, 0), (2, 2, 200), (3, 1, 300),
])
def test_score_table(lines, level, points):
    assert score_for(lines, level) == points


def test_level_uses_combined_score_as_line_proxy():
    assert level_for(0, 0) == 1
    assert level_for(999, 0) == 1
    assert level_for(500, 500) == 2
    assert level_for(1200, 900) == 3


@pytest.mark.parametrize("level,interval", [(1, 1000), (2, 950), (10, 550), (19, 100), (40, 100)])
def test_drop_interval(level, interval):
    assert drop_interval_ms(level) == interval
