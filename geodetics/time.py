"""Calendar epochs for sidereal time calculations"""

from __future__ import annotations

__all__ = ['UTCEpoch']

import calendar
from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import validate_call

from geodetics.sidereal import gast, julian_day
from geodetics.utils.functions import default_to_zulu


_DEFAULT_DATE_FORMATS = [
    '%Y-%m-%dT%H:%M:%S.%f%z',
    '%Y-%m-%dT%H:%M:%S.%f',
    '%Y-%m-%dT%H:%M:%S%z',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M:%S.%f%z',
    '%Y-%m-%d %H:%M:%S.%f',
    '%Y-%m-%d %H:%M:%S%z',
    '%Y-%m-%d %H:%M:%S',
    '%Y-%m-%d',
]


class UTCEpoch:
    """
    A UTC calendar instant, decomposed into the fields used by the sidereal time
    calculations.

    Args:
        year, month, day:
            The Gregorian calendar date

        hour, minute: (int) (Default 0)
            The UTC time of day

        second: (float) (Default 0.0)
            Seconds within the minute, may be fractional
    """

    @validate_call
    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.,
    ):
        if not 1 <= month <= 12:
            raise ValueError(f'month must be within [1, 12], got {month}')
        days_in_month = calendar.monthrange(year, month)[1]
        if not 1 <= day <= days_in_month:
            raise ValueError(f'day must be within [1, {days_in_month}], got {day}')
        if not 0 <= hour < 24:
            raise ValueError(f'hour must be within [0, 24), got {hour}')
        if not 0 <= minute < 60:
            raise ValueError(f'minute must be within [0, 60), got {minute}')
        if not 0 <= second < 60:
            raise ValueError(f'second must be within [0, 60), got {second}')

        self.year, self.month, self.day = year, month, day
        self.hour, self.minute, self.second = hour, minute, second

    def __eq__(self, other) -> bool:
        if not isinstance(other, UTCEpoch):
            return False

        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash(self._fields())

    def __repr__(self):
        return (
            f'<UTCEpoch {self.year:04d}-{self.month:02d}-{self.day:02d}'
            f'T{self.hour:02d}:{self.minute:02d}:{self.second:09.6f}>'
        )

    def _fields(self):
        return self.year, self.month, self.day, self.hour, self.minute, self.second

    @property
    def julian_day(self) -> float:
        """The Julian day number at the start of this epoch's calendar day"""
        return julian_day(self.month, self.day, self.year)

    @classmethod
    def from_datetime(cls, dt: datetime) -> UTCEpoch:
        """
        Create an epoch from a datetime. Datetimes without timezone information are
        assumed to be UTC; aware datetimes are converted to UTC.
        """
        dt = default_to_zulu(dt).astimezone(timezone.utc)
        return cls(
            dt.year, dt.month, dt.day, dt.hour, dt.minute,
            dt.second + dt.microsecond / 1_000_000
        )

    @staticmethod
    def _parse_timestamp(
        time_str: str,
        formats: Optional[List[str]] = None
    ) -> datetime:
        formats = list(formats) if formats else _DEFAULT_DATE_FORMATS
        for idx, fmt in enumerate(formats):
            try:
                parsed = datetime.strptime(time_str, fmt)
                # If the format worked, move to the front so future iterations will find it first
                formats.insert(0, formats.pop(idx))
                return parsed
            except ValueError:
                continue
        raise ValueError(f'Date format was not recognized; {time_str}')

    @classmethod
    def from_str(
        cls,
        time_str: str,
        time_format: Optional[Union[str, List[str]]] = None
    ) -> UTCEpoch:
        """
        Create an epoch from a stringified timestamp. A limited number of default common
        timestamp formats will be checked; you may pass one or more custom formats to
        use instead.

        Uses standard python strptime format codes, documented here:
        https://docs.python.org/3/library/datetime.html#strftime-and-strptime-format-codes

        Args:
            time_str: (str)
                The timestamp, as a string

            time_format: (Union[str, List[str]]) (Optional)
                Any custom timestamp formats to attempt parsing with.

        Returns:
            UTCEpoch
        """
        if isinstance(time_format, str):
            time_format = [time_format]

        return cls.from_datetime(cls._parse_timestamp(time_str, time_format))

    def hour_angle(self, offset_seconds: float = 0.) -> float:
        """
        The Greenwich sidereal hour angle, in radians, at this epoch plus an offset.

        Args:
            offset_seconds: (float) (Default 0.0)
                Seconds elapsed since this epoch

        Returns:
            float
        """
        return gast(
            self.year, self.month, self.day, self.hour, self.minute, self.second,
            offset_seconds
        )

    def to_datetime(self) -> datetime:
        """Convert to a timezone-aware (UTC) datetime"""
        whole = int(self.second)
        return datetime(
            self.year, self.month, self.day, self.hour, self.minute, whole,
            min(round((self.second - whole) * 1_000_000), 999_999),
            tzinfo=timezone.utc,
        )
