"""Helpers for turning numbers and timestamps into label text."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo


def _localize(moment: datetime, tz: str) -> datetime:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc if tz == "UTC" else ZoneInfo(tz))


def format_date_label(moment: datetime, tz: str = "UTC") -> str:
    """Return ``moment`` as a short ``M/D/YYYY`` date."""

    local = _localize(moment, tz)
    return f"{local.month}/{local.day}/{local.year}"


def format_time_label(moment: datetime, tz: str = "UTC") -> str:
    """Return ``moment`` as a 12-hour ``HH:MM`` clock reading with no AM/PM."""

    local = _localize(moment, tz)
    hour = local.hour % 12 or 12
    return f"{hour:02d}:{local.minute:02d}"


def format_grouped(value: float) -> str:
    """Format ``value`` with thousands separators, e.g. ``12,345``."""

    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,}"


def to_precision(value: float, digits: int) -> str:
    """Format ``value`` with ``digits`` significant digits.

    Mirrors the browser ``Number.prototype.toPrecision`` output: fixed
    notation while the exponent is below ``digits`` (keeping trailing zeros,
    so ``1`` becomes ``"1.0"`` for two digits) and ``"1.2e+3"`` style
    exponent notation otherwise.  Ties round away from zero.
    """

    if digits < 1:
        raise ValueError("digits must be positive")
    if value == 0:
        return f"{0:.{digits - 1}f}"
    exact = Decimal(value)
    step = Decimal(1).scaleb(1 - digits)
    exponent = exact.adjusted()
    mantissa = exact.scaleb(-exponent).quantize(step, rounding=ROUND_HALF_UP)
    if abs(mantissa) >= 10:
        exponent += 1
        mantissa = exact.scaleb(-exponent).quantize(step, rounding=ROUND_HALF_UP)
    if exponent < -6 or exponent >= digits:
        sign = "+" if exponent >= 0 else "-"
        return f"{mantissa}e{sign}{abs(exponent)}"
    return f"{mantissa.scaleb(exponent):f}"
