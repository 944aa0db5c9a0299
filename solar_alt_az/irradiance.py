"""Clear-sky irradiance estimate (Haurwitz model)."""

import math

from .angles import deg_to_rad

HAURWITZ_I0 = 1098.0
HAURWITZ_K = 0.057


def clear_sky_irradiance(elevation_deg: float) -> float:
    """Estimate clear-sky irradiance in W/m² from solar elevation.

    I = 1098 * cos(Z) * exp(-0.057 / cos(Z)), with Z the zenith angle.
    Returns 0 when the sun is at or below the horizon.
    """
    if elevation_deg <= 0.0:
        return 0.0
    # cos(zenith) == sin(elevation)
    cos_z = math.sin(deg_to_rad(min(elevation_deg, 90.0)))
    if cos_z <= 0.0:
        return 0.0
    return HAURWITZ_I0 * cos_z * math.exp(-HAURWITZ_K / cos_z)
