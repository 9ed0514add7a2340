from investsim.core.charting import chart_points


def test_short_series_is_kept_whole():
    series = list(range(24))
    assert chart_points(series) == series


def test_medium_series_keeps_every_sixth_point_and_the_last():
    series = list(range(36))
    assert chart_points(series) == [0, 6, 12, 18, 24, 30, 35]


def test_long_series_keeps_every_twelfth_point_and_the_last():
    series = list(range(120))
    assert chart_points(series) == [0, 12, 24, 36, 48, 60, 72, 84, 96, 108, 119]


def test_last_point_is_not_duplicated():
    series = list(range(61))
    assert chart_points(series) == [0, 12, 24, 36, 48, 60]


def test_empty_series():
    assert chart_points([]) == []
