"""Temperature classification.

Maps a whole-degree reading to a label and its color using half-open
intervals:

- `degrees < 5`        -> cold / blue
- `5 <= degrees < 23`  -> mild / yellow
- `degrees >= 23`      -> hot / red

The thresholds are module constants rather than settings: the boundaries
(5 is mild, 23 is hot) are part of the contract.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import ClassificationResult, TemperatureLabel
from core.errors import InvalidTemperatureError
from core.logging import get_logger

COLD_BELOW = 5
HOT_FROM = 23

logger = get_logger(__name__)


def classify_temperature(degrees: int) -> ClassificationResult:
    """Classify a temperature reading.

    Total over all integers, negative ones included. Anything that is not an
    `int` (floats, strings, and `bool`, which is an `int` subclass) raises
    `InvalidTemperatureError`.
    """

    if isinstance(degrees, bool) or not isinstance(degrees, int):
        raise InvalidTemperatureError(degrees)

    if degrees < COLD_BELOW:
        label = TemperatureLabel.COLD
    elif degrees < HOT_FROM:
        label = TemperatureLabel.MILD
    else:
        label = TemperatureLabel.HOT

    logger.debug("classified %d degrees as %s", degrees, label.value)
    return ClassificationResult(degrees=degrees, label=label, color=label.color)


def classify_many(values: Iterable[int]) -> list[ClassificationResult]:
    """Classify several readings, preserving their order."""

    return [classify_temperature(value) for value in values]
