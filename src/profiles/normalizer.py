"""Hourly generation profile normalization.

Converts a raw per-hour generation signal into a capacity-factor series:
- Scale raw readings by rated output and clamp into [0, 1]
- Shift UTC-indexed samples into local solar time (15 degrees per hour)
- Pad or truncate to exactly 8760 hours
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

import numpy as np

from src.domain.errors import EmptyProfileError
from src.domain.models import (
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    HOURS_PER_YEAR,
    fit_capacity_factors,
)

logger = logging.getLogger(__name__)

DEGREES_PER_HOUR = 15.0


def timezone_offset(longitude: float) -> int:
    """Whole-hour UTC offset approximated from longitude.

    Halves round up: longitude ``-112.5`` gives ``-7``, ``112.5`` gives ``8``.

    Args:
        longitude: Site longitude in degrees (east positive).

    Returns:
        Offset in hours, within [-12, 12] for valid longitudes.
    """
    return math.floor(longitude / DEGREES_PER_HOUR + 0.5)


def clamp_capacity_factors(
    raw_samples: Sequence[float], scale: float = 1.0
) -> np.ndarray:
    """Convert raw readings to capacity factors clamped into [0, 1].

    Args:
        raw_samples: Raw hourly readings.
        scale: Rated output in the units of ``raw_samples``.

    Returns:
        Array of capacity factors, same length as the input.
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    arr = np.asarray(raw_samples, dtype=np.float64).ravel() / scale
    return np.clip(np.nan_to_num(arr, nan=0.0), 0.0, 1.0)


def apply_timezone_correction(samples: Sequence[float], offset: int) -> np.ndarray:
    """Redistribute a UTC-indexed series into local time.

    For every UTC slot ``(day, hour)`` of a 365-day year the value is read
    from local hour ``hour - offset``, moving to the previous or next day
    when the hour wraps and wrapping the day modulo 365. Slots whose source
    index lies beyond the input stay zero.

    Args:
        samples: Hourly samples indexed from 00:00 UTC on day 0.
        offset: Whole-hour UTC offset (see ``timezone_offset``).

    Returns:
        Shifted array with the same length as ``samples``.
    """
    data = np.asarray(samples, dtype=np.float64).ravel()
    if offset == 0:
        return data.copy()

    shifted = np.zeros_like(data)
    for day in range(DAYS_PER_YEAR):
        for hour in range(HOURS_PER_DAY):
            target = day * HOURS_PER_DAY + hour
            day_shift, local_hour = divmod(hour - offset, HOURS_PER_DAY)
            local_day = (day + day_shift) % DAYS_PER_YEAR
            source = local_day * HOURS_PER_DAY + local_hour
            if target < data.size and source < data.size:
                shifted[target] = data[source]
    return shifted


def fit_to_year(samples: Sequence[float]) -> tuple[float, ...]:
    """Pad with zeros or truncate to exactly 8760 clamped samples."""
    return fit_capacity_factors(samples)


def normalize(
    raw_samples: Sequence[float],
    longitude: float = 0.0,
    scale: float = 1.0,
    apply_timezone: bool = True,
) -> tuple[float, ...]:
    """Normalize a raw hourly series into a full-year capacity-factor profile.

    Args:
        raw_samples: Raw per-hour generation readings (UTC-anchored).
        longitude: Site longitude used for the timezone shift.
        scale: Rated output in the units of ``raw_samples``.
        apply_timezone: Whether to shift from UTC to local solar time.

    Returns:
        Tuple of exactly 8760 capacity factors in [0, 1].

    Raises:
        EmptyProfileError: If ``raw_samples`` is empty.
    """
    if len(raw_samples) == 0:
        raise EmptyProfileError("provider returned no hourly samples")

    factors = clamp_capacity_factors(raw_samples, scale)
    offset = timezone_offset(longitude) if apply_timezone else 0
    if offset != 0:
        factors = apply_timezone_correction(factors, offset)

    if factors.size != HOURS_PER_YEAR:
        logger.debug(
            "Fitting %d samples to %d hours", factors.size, HOURS_PER_YEAR
        )
    logger.debug("Normalized profile with UTC offset %+d h", offset)
    return fit_to_year(factors)
