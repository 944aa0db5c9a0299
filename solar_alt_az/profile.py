"""Daily sun-path profile for a tracker site.

Samples the solar position across one local day at the site's configured
interval. Entries are indexed by minutes past local midnight (clock time,
DST applied per sample) and can be interpolated between samples.
"""

import logging

from . import dates
from ._types import DailyProfile, ProfileEntry, SiteConfig
from .compute import solar_position

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = SiteConfig()


def minutes_to_time(total_minutes: int) -> tuple[int, int]:
    """Convert minutes since midnight to (hour, minute)."""
    return (total_minutes // 60, total_minutes % 60)


def time_to_minutes(t: tuple[int, int]) -> int:
    """Convert (hour, minute) to minutes since midnight."""
    return t[0] * 60 + t[1]


def intervals_per_day(interval_minutes: int) -> int:
    """Calculate number of intervals in a day."""
    return 1440 // interval_minutes


def daily_profile(
    config: SiteConfig, year: int, month: int, day: int
) -> DailyProfile:
    """Sample elevation, azimuth and irradiance across one local day."""
    if config.interval_minutes <= 0 or 1440 % config.interval_minutes:
        raise ValueError(
            f"interval_minutes must divide a day: {config.interval_minutes}"
        )
    entries = []
    for interval in range(intervals_per_day(config.interval_minutes)):
        minutes = interval * config.interval_minutes
        hour, minute = minutes_to_time(minutes)
        tz_offset = dates.local_tz_offset(
            config.standard_offset, year, month, day, hour, config.observe_dst
        )
        pos = solar_position(
            config.latitude, config.longitude, year, month, day, hour, minute, 0,
            tz_offset,
        )
        entries.append(
            ProfileEntry(
                minutes=minutes,
                elevation=pos.elevation,
                azimuth=pos.azimuth,
                irradiance=pos.irradiance,
            )
        )

    peak = max(entries, key=lambda e: e.elevation)
    # Rectangle rule, W/m² * hours
    insolation = sum(e.irradiance for e in entries) * config.interval_minutes / 60.0

    logger.debug(
        "Profile %04d-%02d-%02d: %d samples, noon at %d min, peak %.2f, %.0f Wh/m²",
        year, month, day, len(entries), peak.minutes, peak.elevation, insolation,
    )
    return DailyProfile(
        config=config,
        year=year,
        month=month,
        day=day,
        entries=entries,
        solar_noon_minutes=peak.minutes,
        peak_elevation=peak.elevation,
        insolation=insolation,
    )


def daylight_entries(profile: DailyProfile) -> list[ProfileEntry]:
    """Entries with the sun above the horizon."""
    return [e for e in profile.entries if e.elevation > 0.0]


def interpolate_angle(a1: float, a2: float, fraction: float) -> float:
    """Interpolate between two angles, handling 360 deg wraparound."""
    diff = a2 - a1
    if diff > 180:
        adjusted_diff = diff - 360
    elif diff < -180:
        adjusted_diff = diff + 360
    else:
        adjusted_diff = diff
    return (a1 + adjusted_diff * fraction) % 360.0


def _interpolate_linear(v1: float, v2: float, fraction: float) -> float:
    return v1 + fraction * (v2 - v1)


def lookup(profile: DailyProfile, minutes: int) -> ProfileEntry | None:
    """Look up the sun position at minutes past midnight by linear interpolation.

    Returns None outside the sampled range.
    """
    entries = profile.entries
    if not entries:
        return None
    first_minutes = entries[0].minutes
    last_minutes = entries[-1].minutes
    if minutes < first_minutes or minutes > last_minutes:
        return None

    idx_before = min(
        int((minutes - first_minutes) // profile.config.interval_minutes),
        len(entries) - 1,
    )
    before = entries[idx_before]
    if minutes == before.minutes or idx_before + 1 >= len(entries):
        return ProfileEntry(
            minutes=minutes,
            elevation=before.elevation,
            azimuth=before.azimuth,
            irradiance=before.irradiance,
        )

    after = entries[idx_before + 1]
    fraction = (minutes - before.minutes) / (after.minutes - before.minutes)
    return ProfileEntry(
        minutes=minutes,
        elevation=_interpolate_linear(before.elevation, after.elevation, fraction),
        azimuth=interpolate_angle(before.azimuth, after.azimuth, fraction),
        irradiance=_interpolate_linear(before.irradiance, after.irradiance, fraction),
    )
