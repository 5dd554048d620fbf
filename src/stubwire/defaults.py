import datetime
import decimal
import pathlib
import uuid
from typing import Any

from stubwire.policies import StandInPolicy

DEFAULT_STAND_IN_POLICY = StandInPolicy.AUTOSPEC

DEFAULT_IGNORED_VALUE_TYPES: tuple[type[Any], ...] = (
    pathlib.PurePath,
    datetime.datetime,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    uuid.UUID,
    decimal.Decimal,
)
"""Value types left at their default when a parameter has one; required ones are stubbed."""
