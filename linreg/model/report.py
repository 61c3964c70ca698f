# linreg/model/report.py
from __future__ import annotations

from typing import Callable, Iterable, TextIO

SEPARATOR = "-" * 76


def format_output(prediction: float, threshold: float) -> str:
    """
    Values strictly inside (-threshold, threshold) are shown as exactly "0".
    The boundary itself is NOT rounded.
    """
    if -threshold < prediction < threshold:
        return "0"
    return str(prediction)


def write_block(
    sink: TextIO,
    inputs: Iterable[float],
    predict: Callable[[float], float],
    threshold: float,
) -> None:
    """
    Streams one prediction block:

    ----------------------------------------------------------------------------
    Input: <x0>
    Output: <y0>

    Input: <x1>
    Output: <y1>
    ----------------------------------------------------------------------------
    <blank>

    `inputs` is consumed lazily, so an unbounded sweep keeps writing.
    """
    sink.write(SEPARATOR + "\n")

    first = True
    for x in inputs:
        if not first:
            sink.write("\n")
        first = False

        sink.write(f"Input: {x}\n")
        sink.write(f"Output: {format_output(predict(x), threshold)}\n")

    sink.write(SEPARATOR + "\n\n")


def sweep(start: float, end: float, step: float) -> Iterable[float]:
    # naive float accumulation; step <= 0 with start <= end never terminates
    x = start
    while x <= end:
        yield x
        x += step
