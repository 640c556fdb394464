"""Integer newtypes for explicitness.

Both wrap a strict integer and serialize back to the bare integer. Range
checks come from the integer constraint, not from the wrappers.
"""

from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Annotated

from pydantic import ConfigDict, Field, RootModel


U32_MAX = 2**32 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

U32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]
I64 = Annotated[int, Field(strict=True, ge=I64_MIN, le=I64_MAX)]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@total_ordering
class Minutes(RootModel[U32]):
    """Duration in minutes, as used for playtime fields."""
    model_config = ConfigDict(frozen=True)

    def __lt__(self, other):
        if not isinstance(other, Minutes):
            return NotImplemented
        return self.root < other.root

    def __str__(self) -> str:
        return str(self.root)

    def as_timedelta(self) -> timedelta:
        return timedelta(minutes=self.root)


@total_ordering
class UnixTimestamp(RootModel[I64]):
    """Seconds since the Unix epoch; negative values predate it."""
    model_config = ConfigDict(frozen=True)

    def __lt__(self, other):
        if not isinstance(other, UnixTimestamp):
            return NotImplemented
        return self.root < other.root

    def __str__(self) -> str:
        return str(self.root)

    def __int__(self) -> int:
        return self.root

    def as_datetime(self) -> datetime:
        """Timezone-aware UTC datetime.

        Raises:
            OverflowError: If the timestamp is outside ``datetime``'s range.
        """
        return _EPOCH + timedelta(seconds=self.root)
