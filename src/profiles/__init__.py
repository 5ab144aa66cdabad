"""Hourly generation profiles: normalization, provider decoding, synthetic data."""

from src.profiles.normalizer import (
    apply_timezone_correction,
    fit_to_year,
    normalize,
    timezone_offset,
)
from src.profiles.providers import (
    ProfileProvider,
    attach_payload,
    attach_profile,
    build_profile,
    decode_ninja_hourly,
    decode_pvgis_hourly,
    validate_location,
)
from src.profiles.synthetic import SyntheticProfileGenerator, to_utc_samples

__all__ = [
    "normalize",
    "timezone_offset",
    "apply_timezone_correction",
    "fit_to_year",
    "ProfileProvider",
    "validate_location",
    "decode_pvgis_hourly",
    "decode_ninja_hourly",
    "build_profile",
    "attach_profile",
    "attach_payload",
    "SyntheticProfileGenerator",
    "to_utc_samples",
]
