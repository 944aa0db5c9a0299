"""Solar position for a date, time and place, and a plain-text report of it."""

import logging
from datetime import datetime as DateTime
from typing import TextIO

from . import angles, dates
from ._types import SolarReading
from .irradiance import clear_sky_irradiance

logger = logging.getLogger(__name__)


def solar_position(
    latitude: float,
    longitude: float,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    tz_offset: float,
    strict: bool = False,
) -> SolarReading:
    """Calculate complete solar position and irradiance for a local clock time.

    tz_offset is hours from UTC and should already include any DST shift
    (see dates.local_tz_offset). Inputs are only range-checked when strict
    is True; otherwise out-of-range values give meaningless numbers.
    """
    if strict:
        dates.check_date(year, month, day)
        dates.check_time(hour, minute, second)
        angles.check_location(latitude, longitude)

    doy = dates.day_of_year(year, month, day)
    gamma = angles.fractional_year(doy, hour)
    decl = angles.solar_declination(gamma)
    eot = angles.equation_of_time(gamma)
    ha = angles.hour_angle(gamma, longitude, hour, minute, second, tz_offset)
    elevation = angles.solar_elevation(latitude, decl, ha)
    azimuth = angles.solar_azimuth(latitude, decl, ha)
    irradiance = clear_sky_irradiance(elevation)

    logger.debug(
        "Solar position %04d-%02d-%02d %02d:%02d:%02d (UTC%+g) at %.4f, %.4f: "
        "elevation=%.2f azimuth=%.2f irradiance=%.1f",
        year, month, day, hour, minute, second, tz_offset,
        latitude, longitude, elevation, azimuth, irradiance,
    )
    return SolarReading(
        day_of_year=doy,
        gamma=gamma,
        declination=angles.rad_to_deg(decl),
        equation_of_time=eot,
        hour_angle=angles.rad_to_deg(ha),
        zenith=90.0 - elevation,
        elevation=elevation,
        azimuth=azimuth,
        irradiance=irradiance,
    )


def solar_position_at(latitude: float, longitude: float, dt: DateTime) -> SolarReading:
    """Calculate solar position for a timezone-aware datetime."""
    if dt.tzinfo is None:
        raise ValueError("dt must be timezone-aware")
    tz_offset = dt.utcoffset().total_seconds() / 3600.0
    return solar_position(
        latitude,
        longitude,
        dt.year,
        dt.month,
        dt.day,
        dt.hour,
        dt.minute,
        dt.second,
        tz_offset,
    )


def format_report(reading: SolarReading) -> str:
    """Render elevation, azimuth and irradiance as report lines."""
    return "\n".join(
        [
            f"Elevation: {reading.elevation:.2f}°",
            f"Azimuth: {reading.azimuth:.2f}°",
            f"Irradiance: {reading.irradiance:.1f} W/m²",
        ]
    )


def compute_solar(
    latitude: float,
    longitude: float,
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    tz_offset: float,
    out: TextIO | None = None,
) -> None:
    """Compute the solar position and write its report to out (default stdout)."""
    reading = solar_position(
        latitude, longitude, year, month, day, hour, minute, second, tz_offset
    )
    print(format_report(reading), file=out)
