"""Solar angle calculations from the fractional-year Fourier series.

Declination and equation of time use Spencer's coefficients as published by
NOAA. Intermediate angles are in radians; elevation, zenith and azimuth are
returned in degrees.
"""

import math

DAYS_PER_YEAR = 365.0
MINUTES_PER_DEGREE = 4.0
DEGREES_PER_HOUR = 15.0


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle % 360.0


def wrap_degrees(angle: float) -> float:
    """Wrap angle into the half-open range [-180, 180)."""
    return (angle + 180.0) % 360.0 - 180.0


def fractional_year(doy: int, hour: float) -> float:
    """Fractional year angle gamma in radians.

    Input: doy = day of year (1-366), hour = local hour (0-23)
    """
    return (2.0 * math.pi / DAYS_PER_YEAR) * (doy - 1 + (hour - 12.0) / 24.0)


def solar_declination(gamma: float) -> float:
    """Calculate solar declination angle in radians.

    Ranges from about -0.409 rad (winter solstice) to +0.409 rad
    (summer solstice).
    """
    return (
        0.006918
        - 0.399912 * math.cos(gamma)
        + 0.070257 * math.sin(gamma)
        - 0.006758 * math.cos(2 * gamma)
        + 0.000907 * math.sin(2 * gamma)
        - 0.002697 * math.cos(3 * gamma)
        + 0.00148 * math.sin(3 * gamma)
    )


def equation_of_time(gamma: float) -> float:
    """Calculate the Equation of Time correction.

    Input: gamma = fractional year (radians)
    Output: correction in minutes
    """
    return 229.18 * (
        0.000075
        + 0.001868 * math.cos(gamma)
        - 0.032077 * math.sin(gamma)
        - 0.014615 * math.cos(2 * gamma)
        - 0.040849 * math.sin(2 * gamma)
    )


def true_solar_time(
    gamma: float,
    longitude: float,
    hour: int,
    minute: int,
    second: int,
    tz_offset: float,
) -> float:
    """Calculate true solar time in minutes past local solar midnight.

    Args:
        gamma: Fractional year (radians)
        longitude: Observer's longitude (degrees, negative for West)
        hour, minute, second: Local clock time
        tz_offset: Hours from UTC, already adjusted for DST if in effect

    The standard meridian of the zone is 15 * tz_offset degrees; each degree
    away from it shifts solar time by four minutes.
    """
    time_offset = (
        equation_of_time(gamma)
        + MINUTES_PER_DEGREE * longitude
        - 60.0 * tz_offset
    )
    return hour * 60.0 + minute + second / 60.0 + time_offset


def hour_angle(
    gamma: float,
    longitude: float,
    hour: int,
    minute: int,
    second: int,
    tz_offset: float,
) -> float:
    """Calculate the hour angle in radians.

    At solar noon: h = 0.
    Morning: h < 0 (sun is east).
    Afternoon: h > 0 (sun is west).
    Wrapped into [-pi, pi).
    """
    tst = true_solar_time(gamma, longitude, hour, minute, second, tz_offset)
    return deg_to_rad(wrap_degrees(tst / MINUTES_PER_DEGREE - 180.0))


def solar_elevation(latitude: float, declination: float, hour_angle: float) -> float:
    """Calculate solar elevation in degrees.

    latitude is in degrees; declination and hour_angle are in radians.
    """
    lat_rad = deg_to_rad(latitude)
    sin_elev = math.sin(lat_rad) * math.sin(declination) + math.cos(
        lat_rad
    ) * math.cos(declination) * math.cos(hour_angle)
    # Clamp to [-1, 1] to handle floating point errors
    return rad_to_deg(math.asin(max(-1.0, min(1.0, sin_elev))))


def solar_zenith(latitude: float, declination: float, hour_angle: float) -> float:
    """Calculate the solar zenith angle in degrees. Complement of elevation."""
    return 90.0 - solar_elevation(latitude, declination, hour_angle)


def solar_azimuth(latitude: float, declination: float, hour_angle: float) -> float:
    """Calculate solar azimuth, clockwise from North, in degrees.

    Returns azimuth in [0, 360) (0=North, 90=East, 180=South, 270=West).
    The sign of the hour angle selects the eastern or western half.
    """
    lat_rad = deg_to_rad(latitude)
    sin_az = -1.0 * math.cos(declination) * math.sin(hour_angle)
    cos_az = math.sin(declination) * math.cos(lat_rad) - math.cos(
        declination
    ) * math.sin(lat_rad) * math.cos(hour_angle)
    az = normalize_angle(rad_to_deg(math.atan2(sin_az, cos_az)))
    return 0.0 if az >= 360.0 else az


def check_location(latitude: float, longitude: float) -> None:
    """Raise ValueError unless latitude and longitude are within range."""
    if not -90.0 <= latitude <= 90.0:
        raise ValueError(f"Latitude out of range: {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise ValueError(f"Longitude out of range: {longitude}")
