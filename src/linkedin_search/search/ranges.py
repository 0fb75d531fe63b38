# ABOUTME: Repairs {min, max} range filters before they are sent to the search API.
# ABOUTME: Drops absent, NaN or infinite bounds and fixes inverted ranges according to a policy.

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

Number = int | float


class RangePolicy(str, Enum):
    """How an inverted range (max below min) is repaired."""

    COLLAPSE = "collapse"  # max becomes min
    DROP_MAX = "drop_max"  # keep min only
    DROP_MAX_INCLUSIVE = "drop_max_inclusive"  # keep min only, also when max == min


def as_bound(value: Any) -> Number | None:
    """Return value as a usable numeric bound, or None if it is absent or malformed."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def repair_range(value: Any, policy: RangePolicy = RangePolicy.COLLAPSE) -> dict[str, Number]:
    """Normalize a single range so that max is never below min.

    Args:
        value: A mapping with optional "min" and "max" keys. Anything else
            is treated as an empty range.
        policy: Repair applied when both bounds are present and inverted.

    Returns:
        One of {}, {"min"}, {"max"} or {"min", "max"}.
    """
    if not isinstance(value, Mapping):
        return {}

    low = as_bound(value.get("min"))
    high = as_bound(value.get("max"))

    if low is None and high is None:
        return {}
    if low is None:
        return {"max": high}
    if high is None:
        return {"min": low}

    if policy is RangePolicy.DROP_MAX_INCLUSIVE and high <= low:
        return {"min": low}
    if high < low:
        if policy is RangePolicy.COLLAPSE:
            return {"min": low, "max": low}
        return {"min": low}
    return {"min": low, "max": high}


def repair_ranges(
    values: Any, policy: RangePolicy = RangePolicy.COLLAPSE
) -> list[dict[str, Number]]:
    """Repair every range in a range-list filter.

    A single range object is accepted as a one-element list. Entries that
    repair to an empty range are left out.

    Args:
        values: A list of range mappings, or one range mapping.
        policy: Repair applied to each inverted range.

    Returns:
        The repaired, non-empty ranges in input order.
    """
    if isinstance(values, Mapping):
        values = [values]
    if not isinstance(values, list | tuple):
        return []

    repaired = (repair_range(item, policy) for item in values)
    return [item for item in repaired if item]
