from datetime import datetime, timedelta, timezone

# India Standard Time, used for every timestamp shown to or stored for users.
IST = timezone(timedelta(hours=5, minutes=30), name="IST")


def to_display_timezone(instant: datetime) -> datetime:
    """Return ``instant`` expressed in IST. Naive values are taken as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(IST)


def display_now() -> datetime:
    return to_display_timezone(datetime.now(timezone.utc))


def format_display_time(instant: datetime) -> str:
    """Render like the en-IN locale does, e.g. ``17/10/2026, 2:05:09 pm``."""
    local = to_display_timezone(instant)
    hour = local.hour % 12 or 12
    meridiem = "am" if local.hour < 12 else "pm"
    return (
        f"{local.day}/{local.month}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )


def display_wall_clock() -> datetime:
    """Naive IST wall-clock time of now, for timezone-less DateTime columns."""
    return display_now().replace(tzinfo=None)
