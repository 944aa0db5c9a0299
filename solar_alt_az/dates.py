"""Calendar utilities: day of year, day of week and the U.S. DST rule."""

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

DST_START_MONTH = 3
DST_END_MONTH = 11
DST_TRANSITION_HOUR = 2


def leap_year(year: int) -> bool:
    """Returns True if year is a leap year."""
    return (year % 400 == 0) or (year % 4 == 0 and year % 100 != 0)


def days_in_months(year: int) -> list[int]:
    """Returns a list of days per month for the given year."""
    return [31, 29 if leap_year(year) else 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def day_of_year(year: int, month: int, day: int) -> int:
    """Calculate day of year (1-366) from year, month, day."""
    return sum(days_in_months(year)[: month - 1]) + day


def day_of_week(year: int, month: int, day: int) -> int:
    """Day of week by Zeller's congruence.

    Returns 0 for Monday through 6 for Sunday, matching datetime.date.weekday().
    """
    if month < 3:
        month += 12
        year -= 1
    k = year % 100
    j = year // 100
    # h: 0 = Saturday, 1 = Sunday, ..., 6 = Friday
    h = (day + (13 * (month + 1)) // 5 + k + k // 4 + j // 4 + 5 * j) % 7
    return (h + 5) % 7


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> int:
    """Day of month of the n-th given weekday (n=1 for the first)."""
    first = day_of_week(year, month, 1)
    return 1 + (weekday - first) % 7 + 7 * (n - 1)


def is_dst(year: int, month: int, day: int, hour: int) -> bool:
    """Whether U.S. daylight saving time (2007 rules) is in effect.

    DST runs from 02:00 on the second Sunday in March to 02:00 on the first
    Sunday in November, local time. On the spring transition day hours >= 2
    count as DST; on the autumn transition day hours >= 2 count as standard.
    """
    if month < DST_START_MONTH or month > DST_END_MONTH:
        return False
    if DST_START_MONTH < month < DST_END_MONTH:
        return True
    if month == DST_START_MONTH:
        start = nth_weekday_of_month(year, month, SUNDAY, 2)
        return day > start or (day == start and hour >= DST_TRANSITION_HOUR)
    end = nth_weekday_of_month(year, month, SUNDAY, 1)
    return day < end or (day == end and hour < DST_TRANSITION_HOUR)


def local_tz_offset(
    standard_offset: float,
    year: int,
    month: int,
    day: int,
    hour: int,
    observe_dst: bool = True,
) -> float:
    """UTC offset in hours for local clock time, one hour ahead during DST."""
    if observe_dst and is_dst(year, month, day, hour):
        return standard_offset + 1
    return standard_offset


def check_date(year: int, month: int, day: int) -> None:
    """Raise ValueError unless (year, month, day) is a real Gregorian date."""
    if year < 1:
        raise ValueError(f"Year out of range: {year}")
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")
    last = days_in_months(year)[month - 1]
    if not 1 <= day <= last:
        raise ValueError(f"Day out of range for {year}-{month:02d}: {day}")


def check_time(hour: int, minute: int, second: int) -> None:
    """Raise ValueError unless the time of day is within its nominal range."""
    if not 0 <= hour <= 23:
        raise ValueError(f"Hour out of range: {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"Minute out of range: {minute}")
    if not 0 <= second <= 59:
        raise ValueError(f"Second out of range: {second}")
