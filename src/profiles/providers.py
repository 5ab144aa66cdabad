"""Decoding of third-party hourly generation payloads.

The engine never performs HTTP retrieval. Collaborators fetch the JSON
documents below and hand the parsed payload to this module:

- PVGIS ``seriescalc`` (solar): ``outputs.hourly[*].P`` in W for a 1 kWp array
- Renewables.ninja ``data/wind``: ``data[timestamp].electricity`` as a
  capacity factor of a 1 MW turbine

Request parameter builders document what the collaborator should ask for.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from src.domain.errors import (
    EmptyProfileError,
    InvalidLocationError,
    ProfilePayloadError,
)
from src.domain.models import Location, PowerSource, PowerSourceKind
from src.profiles.normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_YEAR = 2022

# PVGIS reports AC output in W for a 1 kWp system
PVGIS_RATED_OUTPUT_W = 1000.0
PVGIS_BASE_URL = "https://re.jrc.ec.europa.eu/api/v5_3/seriescalc"
NINJA_BASE_URL = "https://www.renewables.ninja/api/data/wind"
NINJA_TURBINE = "Vestas V90 2000"
NINJA_HUB_HEIGHT_M = 100


class ProfileProvider(str, Enum):
    """Supported hourly-profile providers."""

    PVGIS = "pvgis"
    RENEWABLES_NINJA = "renewables_ninja"


PROVIDER_FOR_KIND: dict[PowerSourceKind, ProfileProvider] = {
    PowerSourceKind.SOLAR: ProfileProvider.PVGIS,
    PowerSourceKind.WIND: ProfileProvider.RENEWABLES_NINJA,
}


def validate_location(source: PowerSource) -> Location:
    """Return the source location or raise if a profile cannot be requested.

    Raises:
        InvalidLocationError: For grid sources or sources without a location.
    """
    if source.kind == PowerSourceKind.GRID:
        raise InvalidLocationError("grid sources have no generation profile")
    if source.location is None:
        raise InvalidLocationError(
            f"{source.label} source needs a latitude and longitude"
        )
    return source.location


def pvgis_request_params(location: Location, year: int | None = None) -> dict[str, Any]:
    """Query parameters for an hourly single-axis-tracking PVGIS series."""
    year = year or DEFAULT_PROFILE_YEAR
    return {
        "lat": location.lat,
        "lon": location.lng,
        "startyear": year,
        "endyear": year,
        "pvcalculation": 1,
        "peakpower": 1,
        "trackingtype": 5,
        "loss": 10,
        "hourlydata": 1,
        "components": 1,
        "outputformat": "json",
        "optimalinclination": 1,
        "mountingplace": "free",
    }


def ninja_request_params(location: Location, year: int | None = None) -> dict[str, Any]:
    """Query parameters for a Renewables.ninja hourly wind series."""
    year = year or DEFAULT_PROFILE_YEAR
    return {
        "lat": location.lat,
        "lon": location.lng,
        "date_from": f"{year}-01-01",
        "date_to": f"{year}-12-31",
        "capacity": 1.0,
        "height": NINJA_HUB_HEIGHT_M,
        "turbine": NINJA_TURBINE,
        "format": "json",
    }


def decode_pvgis_hourly(payload: Mapping[str, Any]) -> list[float]:
    """Extract hourly AC output (W per kWp) from a PVGIS payload.

    Raises:
        ProfilePayloadError: If ``outputs.hourly`` is missing or malformed.
    """
    try:
        hourly = payload["outputs"]["hourly"]
        samples = [float(entry["P"]) for entry in hourly]
    except (KeyError, TypeError, ValueError) as e:
        raise ProfilePayloadError(f"invalid PVGIS data format: {e}") from e
    return samples


def decode_ninja_hourly(payload: Mapping[str, Any]) -> list[float]:
    """Extract hourly capacity factors from a Renewables.ninja payload.

    Hours without an ``electricity`` value count as zero output.

    Raises:
        ProfilePayloadError: If the ``data`` mapping is missing or a
            value is not numeric.
    """
    data = payload.get("data") if isinstance(payload, Mapping) else None
    if not isinstance(data, Mapping):
        raise ProfilePayloadError("invalid Renewables.ninja data format")

    samples: list[float] = []
    for record in data.values():
        value = record.get("electricity") if isinstance(record, Mapping) else None
        try:
            samples.append(float(value) if value is not None else 0.0)
        except (TypeError, ValueError) as e:
            raise ProfilePayloadError(
                f"invalid Renewables.ninja data format: {e}"
            ) from e
    return samples


def build_profile(
    kind: PowerSourceKind,
    payload: Mapping[str, Any],
    location: Location,
) -> tuple[float, ...]:
    """Decode a provider payload and normalize it to 8760 capacity factors.

    Args:
        kind: Source kind, which selects the provider schema.
        payload: Parsed JSON document returned by the provider.
        location: Site location, used for the timezone shift.

    Returns:
        Normalized capacity-factor profile.

    Raises:
        InvalidLocationError: For grid sources.
        ProfilePayloadError: If the payload does not match the schema.
        EmptyProfileError: If the payload carries no hourly samples.
    """
    provider = PROVIDER_FOR_KIND.get(kind)
    if provider is None:
        raise InvalidLocationError(f"no profile provider for {kind.value} sources")

    if provider == ProfileProvider.PVGIS:
        raw = decode_pvgis_hourly(payload)
        scale = PVGIS_RATED_OUTPUT_W
    else:
        raw = decode_ninja_hourly(payload)
        scale = 1.0

    if not raw:
        raise EmptyProfileError(f"{provider.value} returned no hourly samples")

    logger.info(
        "Decoded %d hourly samples from %s at (%.3f, %.3f)",
        len(raw),
        provider.value,
        location.lat,
        location.lng,
    )
    return normalize(raw, longitude=location.lng, scale=scale)


def attach_profile(
    source: PowerSource,
    raw_samples: Sequence[float],
    scale: float = 1.0,
    apply_timezone: bool = True,
) -> PowerSource:
    """Return a copy of ``source`` carrying a normalized profile.

    Any LCOE on the source is cleared because it no longer matches the
    attached profile; the pipeline derives a fresh one.

    Raises:
        InvalidLocationError: If the source has no usable location.
        EmptyProfileError: If ``raw_samples`` is empty.
    """
    location = validate_location(source)
    profile = normalize(
        raw_samples,
        longitude=location.lng,
        scale=scale,
        apply_timezone=apply_timezone,
    )
    return source.model_copy(update={"time_series": profile, "lcoe": None})


def attach_payload(source: PowerSource, payload: Mapping[str, Any]) -> PowerSource:
    """Decode a provider payload and attach it to ``source``."""
    location = validate_location(source)
    profile = build_profile(source.kind, payload, location)
    return source.model_copy(update={"time_series": profile, "lcoe": None})
