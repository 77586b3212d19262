"""Traffic-light signal shared by analyzer outputs.

Rendering layers map these to colors; the engine never emits CSS.
"""

from enum import StrEnum


class Signal(StrEnum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    NEUTRAL = "neutral"
