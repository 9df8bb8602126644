"""Scalar helpers: clamping, interpolation, range mapping and approximate equality."""

import math

EPSILON = 0.000001


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit ``value`` to the range [minimum, maximum]."""
    result = minimum if value < minimum else value
    return maximum if result > maximum else result


def lerp(start: float, end: float, amount: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + amount * (end - start)


def normalize(value: float, start: float, end: float) -> float:
    """Position of ``value`` within [start, end] as a fraction."""
    return (value - start) / (end - start)


def remap(
    value: float,
    input_start: float,
    input_end: float,
    output_start: float,
    output_end: float,
) -> float:
    """Map ``value`` from the input range onto the output range."""
    return (value - input_start) / (input_end - input_start) * (output_end - output_start) + output_start


def wrap(value: float, minimum: float, maximum: float) -> float:
    """Wrap ``value`` into the interval starting at ``minimum`` of width maximum - minimum."""
    span = maximum - minimum
    return value - span * math.floor((value - minimum) / span)


def float_equals(x: float, y: float) -> bool:
    """Whether two floats are equal within a relative tolerance."""
    return abs(x - y) <= EPSILON * max(1.0, abs(x), abs(y))