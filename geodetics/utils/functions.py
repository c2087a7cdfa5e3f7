"""Module for miscellaneous multi-use functions"""

__all__ = ['default_to_zulu', 'round_half_up']

from datetime import datetime, timezone
import math

from geodetics.utils.logging import warn_once


def default_to_zulu(dt: datetime) -> datetime:
    """Add Zulu/UTC as timezone, if timezone not present"""
    if not dt.tzinfo:
        warn_once(
            'Datetime does not contain timezone information; Zulu/UTC time assumed. '
            '(this warning will not repeat)'
        )
        return dt.replace(tzinfo=timezone.utc)

    return dt


def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer, where a value exactly between two integers is
    rounded towards positive infinity (python's round() rounds half to even).

    Args:
        value:
            The float value to be rounded
    """
    return math.floor(value + 0.5)
