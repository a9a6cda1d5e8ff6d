"""
Integer width tiers.

Every operation computes exactly and then checks each intermediate value
against a width tier. Two tiers are defined:
- INT32: 32-bit signed, for callers that need i32 semantics
- INT64: the default

Used by validation, the checked kernels, and the value types.
"""

from dataclasses import dataclass

import numpy as np

from vectorops.core.exceptions import ValidationError


@dataclass(frozen=True)
class IntegerWidth:
    """Signed integer width specification."""
    name: str
    dtype: type[np.signedinteger]
    bits: int

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.dtype).max)

    @property
    def bounds(self) -> tuple[int, int]:
        return (self.min_value, self.max_value)

    def contains(self, value: int) -> bool:
        """True if value is representable at this width."""
        return self.min_value <= value <= self.max_value


INT32 = IntegerWidth(name='int32', dtype=np.int32, bits=32)

INT64 = IntegerWidth(name='int64', dtype=np.int64, bits=64)

DEFAULT_WIDTH = INT64

_TIERS = {tier.name: tier for tier in (INT32, INT64)}


def select_width(width: str | IntegerWidth) -> IntegerWidth:
    """Resolve a width name ('int32', 'int64') or tier to an IntegerWidth."""
    if isinstance(width, IntegerWidth):
        return width
    try:
        return _TIERS[width]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown integer width: {width!r}. Must be 'int32' or 'int64'."
        ) from None
