import pytest

from rustdrill.lessons.options import Point, describe_point, maybe_icecream


@pytest.mark.parametrize(
    "hour, expected",
    [(9, 5), (10, 5), (23, 0), (22, 0), (24, 0), (25, None)],
)
def test_check_icecream(hour, expected):
    assert maybe_icecream(hour) == expected


def test_raw_value():
    icecreams = maybe_icecream(12)
    assert (icecreams or 0) == 5


def test_negative_hour_rejected():
    with pytest.raises(ValueError):
        maybe_icecream(-1)


def test_describe_point():
    assert describe_point(Point(100, 200)) == "Co-ordinates are 100,200 "


def test_describe_missing_point():
    assert describe_point(None) == "no match"