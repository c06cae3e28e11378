import pytest

from workfetch.duration import format_duration


@pytest.mark.parametrize(
    "minutes,expected",
    [
        (480, "8 Std 0 Min"),
        (45, "45 Min"),
        (0, "0 Min"),
        (60, "1 Std 0 Min"),
        (125, "2 Std 5 Min"),
    ],
)
def test_format_duration(minutes: int, expected: str) -> None:
    assert format_duration(minutes) == expected
