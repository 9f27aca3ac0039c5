"""Time zone resolution helpers.

Zone lookup is injectable: anything that maps an identifier to a tzinfo and
raises LookupError, ValueError or OSError for unknown names can stand in for
zoneinfo.ZoneInfo.
"""

import logging
import os
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo

from ..config import settings
from ..exceptions import UnknownTimeZone

logger = logging.getLogger(__name__)

ZoneResolver = Callable[[str], tzinfo]

SYSTEM_LOCALTIME = "/etc/localtime"


def load_zone(name: str, resolver: ZoneResolver = ZoneInfo) -> tzinfo:
    """Resolve a zone database identifier to a tzinfo.

    An empty name resolves to UTC.

    Raises:
        UnknownTimeZone: If the resolver does not know the name.
    """
    if not name:
        return UTC
    try:
        return resolver(name)
    # ZoneInfo raises IsADirectoryError for "America" and ENAMETOOLONG for
    # oversized keys, both OSError
    except (LookupError, ValueError, OSError) as e:
        logger.warning(f"Unknown time zone: {name!r}")
        raise UnknownTimeZone(
            f"unknown time zone {name}",
            details={"time_zone": name}
        ) from e


def fixed_zone(offset_seconds: int) -> timezone:
    """Build a fixed-offset zone labelled "UTC+H" / "UTC-H".

    H is the offset in whole hours, truncated toward zero.
    """
    hours = int(offset_seconds / 3600)
    return timezone(timedelta(seconds=offset_seconds), f"UTC{hours:+d}")


def system_zone() -> tzinfo:
    """Detect the operating system's local zone.

    Tries, in order: the TZ environment variable, the /etc/localtime zone
    file, and finally the fixed offset currently in effect.
    """
    name = os.environ.get("TZ", "").lstrip(":")
    if name:
        try:
            return load_zone(name)
        except UnknownTimeZone:
            logger.debug(f"TZ={name!r} is not a zone database key, trying {SYSTEM_LOCALTIME}")

    try:
        target = os.path.realpath(SYSTEM_LOCALTIME)
        if "zoneinfo/" in target:
            return load_zone(target.split("zoneinfo/", 1)[1])
        with open(SYSTEM_LOCALTIME, "rb") as f:
            return ZoneInfo.from_file(f)
    except (OSError, ValueError, UnknownTimeZone) as e:
        logger.debug(f"Cannot read {SYSTEM_LOCALTIME}: {e}")

    return datetime.now().astimezone().tzinfo


def local_zone() -> tzinfo:
    """Return the configured local zone, falling back to the OS zone."""
    if settings.local_timezone:
        return load_zone(settings.local_timezone)
    return system_zone()
