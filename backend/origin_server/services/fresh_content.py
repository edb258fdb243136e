"""
Builds the payloads served by the origin's dynamic endpoints.

Every call produces a new response object; nothing is shared between requests
apart from the read-only settings and the random source.
"""
from __future__ import annotations

import logging
import math
import random
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.config import Settings, get_settings
from ..schemas.content import InfoResponse, SampleResponse

logger = logging.getLogger(__name__)

INFO_MESSAGE = "Hello from Origin Server!"
SAMPLE_MESSAGE = "This is fresh content!"

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

# Indian Standard Time has no DST, so the fixed offset is exact.
IST_FALLBACK = timezone(timedelta(hours=5, minutes=30), "IST")


def resolve_timezone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        logger.warning("Time zone %s not found in tz database, using fixed UTC+05:30", name)
        return IST_FALLBACK


def iso_utc_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:mm:ss.sssZ``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def display_timestamp(moment: datetime, zone: tzinfo) -> str:
    """Render ``moment`` in ``zone`` using the en-IN layout with a 24-hour clock.

    Day and month are not zero padded, the clock is: ``5/3/2024, 09:05:07``.
    The hour after midnight reads ``24`` on the new date, as in
    ``2/7/2024, 24:15:30``.
    """
    local = moment.astimezone(zone)
    return f"{local.day}/{local.month}/{local.year}, {local.hour or 24:02d}:{local:%M:%S}"


def float_to_base36(value: float) -> str:
    """Write a float from ``[0, 1)`` in radix 36, e.g. ``0.4fzyo82mvyr``.

    Emits fraction digits until the remaining fraction is below the precision
    of ``value``, rounding the last digit up when the remainder calls for it.
    """
    if value <= 0.0:
        return "0"

    # Half the distance to the next representable double.
    delta = max(0.5 * (math.nextafter(value, 1.0) - value), math.nextafter(0.0, 1.0))
    fraction = value
    digits = []
    while True:
        fraction *= 36
        delta *= 36
        digit = int(fraction)
        digits.append(digit)
        fraction -= digit
        if (fraction > 0.5 or (fraction == 0.5 and digit & 1)) and fraction + delta > 1:
            # Round up, carrying through trailing "z" digits.
            while digits and digits[-1] == 35:
                digits.pop()
            if not digits:
                return "1"
            digits[-1] += 1
            break
        if fraction < delta:
            break

    return "0." + "".join(BASE36_DIGITS[d] for d in digits)


class FreshContentService:
    """Produces the info and sample payloads for a single request."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._rng = rng or random.Random()
        self._zone = resolve_timezone(self._settings.DISPLAY_TIMEZONE)

    def build_info(self) -> InfoResponse:
        return InfoResponse(
            message=INFO_MESSAGE,
            timestamp=iso_utc_timestamp(self._clock()),
            server=self._settings.SERVER_NAME,
        )

    def build_sample(self) -> SampleResponse:
        """Generate a fresh sample payload and log its timestamp."""
        payload = SampleResponse(
            message=SAMPLE_MESSAGE,
            timestamp=display_timestamp(self._clock(), self._zone),
            cached=False,
            request_id=float_to_base36(self._rng.random()),
            server=self._settings.SERVER_NAME,
        )
        logger.info("Origin: Generated fresh data at %s", payload.timestamp)
        return payload


def create_fresh_content_service(settings: Optional[Settings] = None) -> FreshContentService:
    """Factory used by the API dependency layer."""
    return FreshContentService(settings=settings)
