"""
Tick planning for the axis guides.

Two separate pieces: `find_optimal_step` snaps a rough model-space step to a
1/2/5 decade value, and `TickSequence` enumerates the multiples of that step
that fall on an axis range, nearest-to-zero negatives first.
"""
from __future__ import annotations
import math
from typing import Iterator

# log10 fractions at which the step switches from 1 to 2 to 5 to 10
STEP_THRESHOLDS = ((0.17, 1.0), (0.5, 2.0), (0.85, 5.0))


def find_optimal_step(step: float) -> float:
    if not math.isfinite(step) or step <= 0:
        raise ValueError(f"Tick step must be a positive finite number, got {step!r}")

    log10 = math.log10(step)
    floor = math.floor(log10)
    fract = log10 - floor
    scale = 10.0
    for limit, multiplier in STEP_THRESHOLDS:
        if fract < limit:
            scale = multiplier
            break
    return 10.0 ** floor * scale


def format_tick_label(value: float) -> str:
    text = f"{value:.12g}"
    return "0" if text == "-0" else text


class TickSequence:
    """
    Multiples of `step` inside the closed range [min, max], zero excluded.

    Negative ticks come first, walking outward from zero (-step, -2*step, ...),
    then the positive ticks walking upward. Each call to `iterate` returns a
    new forward-only generator.
    """

    def __init__(self, min_value: float, max_value: float, step: float):
        if not step > 0:
            raise ValueError(f"Tick step must be positive, got {step!r}")
        self.min = min_value
        self.max = max_value
        self.step = step

    def __iter__(self) -> Iterator[float]:
        return self.iterate()

    def iterate(self) -> Iterator[float]:
        step = self.step

        # Negative side: start at -step, or further out when max is below it
        k = -1
        if self.max < -step:
            k = math.floor(self.max / step)
        # Rounding can put the first multiple just past the near bound
        while k * step > self.max:
            k -= 1
        while k * step >= self.min:
            yield k * step
            k -= 1

        # Positive side: start at step, or further out when min is above it
        k = 1
        if self.min > step:
            k = math.ceil(self.min / step)
        while k * step < self.min:
            k += 1
        while k * step <= self.max:
            yield k * step
            k += 1
