"""Demonstrate solar position calculations for Springfield, IL on June 21 at 1 PM CDT."""

from datetime import datetime
from zoneinfo import ZoneInfo

from solar_alt_az._types import SiteConfig
from solar_alt_az.compute import compute_solar, solar_position_at
from solar_alt_az.dates import is_dst, local_tz_offset
from solar_alt_az.profile import daily_profile, daylight_entries, minutes_to_time


def main():
    site = SiteConfig(latitude=39.8, longitude=-89.6, standard_offset=-6)
    year, month, day, hour, minute, second = 2026, 6, 21, 13, 0, 0

    tz_offset = local_tz_offset(site.standard_offset, year, month, day, hour)

    print("=== Solar Position Calculation Example ===")
    print(f"Location: Springfield, IL ({site.latitude:.1f}°N, {-site.longitude:.1f}°W)")
    print(f"Date/Time: {year}-{month:02d}-{day:02d} {hour:02d}:{minute:02d}:{second:02d}")
    print(f"DST in effect: {is_dst(year, month, day, hour)} (UTC{tz_offset:+g})")
    print()
    print("--- Report ---")
    compute_solar(
        site.latitude, site.longitude, year, month, day, hour, minute, second, tz_offset
    )
    print()

    dt = datetime(year, month, day, hour, minute, second, tzinfo=ZoneInfo("America/Chicago"))
    pos = solar_position_at(site.latitude, site.longitude, dt)
    print("--- Solar Position ---")
    print(f"Day of year: {pos.day_of_year}")
    print(f"Declination: {pos.declination:.2f}°")
    print(f"Equation of Time: {pos.equation_of_time:.2f} minutes")
    print(f"Hour Angle: {pos.hour_angle:.2f}°")
    print(f"Zenith Angle: {pos.zenith:.2f}°")
    print(f"Elevation: {pos.elevation:.2f}°")
    print(f"Azimuth: {pos.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    print()

    profile = daily_profile(site, year, month, day)
    daylight = daylight_entries(profile)
    noon_h, noon_m = minutes_to_time(profile.solar_noon_minutes)
    print("--- Daily Profile ---")
    print(f"Solar noon (clock): {noon_h:02d}:{noon_m:02d}")
    print(f"Peak elevation: {profile.peak_elevation:.2f}°")
    print(f"Daylight samples: {len(daylight)} of {len(profile.entries)}")
    print(f"Clear-sky insolation: {profile.insolation / 1000.0:.2f} kWh/m²")


if __name__ == "__main__":
    main()
