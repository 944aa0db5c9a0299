"""Frozen dataclasses for all structured return types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SolarReading:
    day_of_year: int
    gamma: float
    declination: float
    equation_of_time: float
    hour_angle: float
    zenith: float
    elevation: float
    azimuth: float
    irradiance: float


@dataclass(frozen=True)
class SiteConfig:
    latitude: float = 39.8
    longitude: float = -89.6
    standard_offset: float = -6
    observe_dst: bool = True
    interval_minutes: int = 5


@dataclass(frozen=True)
class ProfileEntry:
    minutes: int
    elevation: float
    azimuth: float
    irradiance: float


@dataclass(frozen=True)
class DailyProfile:
    config: SiteConfig
    year: int
    month: int
    day: int
    entries: list[ProfileEntry]
    solar_noon_minutes: int
    peak_elevation: float
    insolation: float
