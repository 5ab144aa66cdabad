"""Synthetic solar and wind capacity-factor profiles.

Produces full-year hourly profiles for demos and tests with:
- Diurnal patterns (solar follows the sun, wind peaks overnight)
- Seasonal variations (solar amplitude grows with latitude)
- Daily cloud cover and wind noise
- Reproducible via numpy.random.Generator seeds
"""

from __future__ import annotations

import numpy as np
from numpy.random import Generator

from src.domain.models import DAYS_PER_YEAR, HOURS_PER_DAY, HOURS_PER_YEAR
from src.profiles.normalizer import apply_timezone_correction, timezone_offset


class SyntheticProfileGenerator:
    """Generates synthetic hourly capacity-factor profiles in local time.

    All values are capacity factors in [0, 1].
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the profile generator.

        Args:
            seed: Random seed for reproducibility.
        """
        self._rng: Generator = np.random.default_rng(seed)

    def _solar_capacity_factor(
        self, hour: int, day_of_year: int, latitude: float
    ) -> float:
        """Clear-sky solar capacity factor for a local hour and day.

        Args:
            hour: Hour of day (0-23).
            day_of_year: Day of year (1-365).
            latitude: Site latitude in degrees.

        Returns:
            Capacity factor between 0 and 1.
        """
        # No solar at night
        if hour < 5 or hour > 20:
            return 0.0

        # Diurnal pattern: bell curve peaking at solar noon (~13:00)
        solar_noon = 13.0
        hour_factor = max(0.0, 1 - ((hour - solar_noon) / 7) ** 2)

        # Seasonal pattern: peak at the local summer solstice
        solstice = 172 if latitude >= 0 else 355
        amplitude = 0.4 * min(abs(latitude), 60.0) / 60.0
        seasonal_factor = (1.0 - amplitude) + amplitude * np.cos(
            2 * np.pi * (day_of_year - solstice) / DAYS_PER_YEAR
        )

        return float(hour_factor * seasonal_factor)

    def _wind_capacity_factor(self, hour: int, day_of_year: int) -> float:
        """Wind capacity factor, stronger at night and in spring/fall.

        Args:
            hour: Hour of day (0-23).
            day_of_year: Day of year (1-365).

        Returns:
            Capacity factor between 0 and 1.
        """
        # Wind picks up in the evening and peaks overnight
        hour_factor = 0.3 + 0.2 * np.cos(2 * np.pi * (hour - 3) / 24)

        # Peaks in spring (day 80) and fall (day 265)
        seasonal_factor = 0.5 + 0.3 * np.cos(4 * np.pi * day_of_year / DAYS_PER_YEAR)

        return float(hour_factor * seasonal_factor)

    def solar_profile(
        self,
        latitude: float = 38.9,
        max_cloud_cover: float = 0.3,
    ) -> tuple[float, ...]:
        """Generate a full-year solar profile.

        Args:
            latitude: Site latitude in degrees.
            max_cloud_cover: Upper bound of the daily cloud cover fraction.

        Returns:
            Tuple of 8760 capacity factors.
        """
        profile = np.zeros(HOURS_PER_YEAR)
        for day in range(DAYS_PER_YEAR):
            # Clouds reduce solar by up to 80%
            cloud_cover = float(self._rng.uniform(0, max_cloud_cover))
            for hour in range(HOURS_PER_DAY):
                cf = self._solar_capacity_factor(hour, day + 1, latitude)
                profile[day * HOURS_PER_DAY + hour] = cf * (1 - cloud_cover * 0.8)
        return tuple(float(v) for v in np.clip(profile, 0.0, 1.0))

    def wind_profile(
        self,
        wind_speed_factor: float = 1.0,
        noise_std: float = 0.05,
    ) -> tuple[float, ...]:
        """Generate a full-year wind profile.

        Args:
            wind_speed_factor: Multiplier on the base capacity factor.
            noise_std: Standard deviation of hourly Gaussian noise.

        Returns:
            Tuple of 8760 capacity factors.
        """
        profile = np.zeros(HOURS_PER_YEAR)
        for day in range(DAYS_PER_YEAR):
            for hour in range(HOURS_PER_DAY):
                cf = self._wind_capacity_factor(hour, day + 1) * wind_speed_factor
                profile[day * HOURS_PER_DAY + hour] = cf
        profile += self._rng.normal(0, noise_std, HOURS_PER_YEAR)
        return tuple(float(v) for v in np.clip(profile, 0.0, 1.0))


def to_utc_samples(profile: tuple[float, ...], longitude: float) -> list[float]:
    """Re-index a local-time profile to UTC, as a provider would deliver it."""
    offset = timezone_offset(longitude)
    return [float(v) for v in apply_timezone_correction(profile, -offset)]
