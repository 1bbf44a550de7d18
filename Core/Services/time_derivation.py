from typing import NamedTuple

from Infrastructure.variables import COUNTDOWN_SEPARATOR


class DisplayTuple(NamedTuple):
    """The five countdown cells, in the order they are rendered."""
    minute_1: str
    minute_2: str
    separator: str
    second_1: str
    second_2: str

    @property
    def minutes(self):
        return self.minute_1 + self.minute_2

    @property
    def seconds(self):
        return self.second_1 + self.second_2

    @property
    def text(self):
        return "".join(self)


def pad_two(value):
    """
    Zero-pads to two characters: 5 -> "05", 12 -> "12".
    Values that need three or more characters are returned as is.
    """
    return f"{value:02d}"


def total_seconds_for(cycle):
    return cycle.total_seconds if cycle is not None else 0


def remaining_seconds(cycle, elapsed_seconds):
    """Seconds left on the countdown, never below zero."""
    return max(total_seconds_for(cycle) - elapsed_seconds, 0)


def _split(text):
    # Leading characters go in the first cell so nothing is cut off
    return text[:-1], text[-1]


def derive_display(active_cycle, elapsed_seconds):
    """Pure: (active cycle or None, elapsed seconds) -> DisplayTuple."""
    minutes, seconds = divmod(remaining_seconds(active_cycle, elapsed_seconds), 60)
    minute_1, minute_2 = _split(pad_two(minutes))
    second_1, second_2 = _split(pad_two(seconds))
    return DisplayTuple(minute_1, minute_2, COUNTDOWN_SEPARATOR, second_1, second_2)
