# ABOUTME: Coercion helpers that turn loosely typed filter values into wire values.
# ABOUTME: Covers text trimming, string-or-list wrapping, network distance and language codes.

from typing import Any

NetworkDistance = int | str

NETWORK_DISTANCE_CODES: dict[str, NetworkDistance] = {
    "1": 1,
    "2": 2,
    "3": 3,
    "GROUP": "GROUP",
}


def is_non_empty_list(value: Any) -> bool:
    """Return True if value is a list (or tuple) with at least one element."""
    return isinstance(value, list | tuple) and len(value) > 0


def clean_text(value: Any) -> str | None:
    """Return the trimmed string, or None if value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def as_string_list(value: Any) -> list[str] | None:
    """Normalize a string-or-list filter value to a list of strings.

    A bare non-blank string is wrapped in a one-element list. A list keeps
    its string members unchanged. Everything else yields None.

    Args:
        value: The raw filter value.

    Returns:
        A non-empty list of strings, or None when there is nothing to send.
    """
    if isinstance(value, str):
        return [value] if value.strip() else None
    if not is_non_empty_list(value):
        return None
    items = [item for item in value if isinstance(item, str)]
    return items or None


def coerce_network_distance(value: Any) -> list[NetworkDistance] | None:
    """Map network distance codes onto the wire vocabulary.

    "1", "2" and "3" become integers and "GROUP" is kept. Unrecognized codes
    are dropped.

    Args:
        value: The raw network_distance filter value.

    Returns:
        The coerced codes, or None if none survived.
    """
    if not is_non_empty_list(value):
        return None

    distances: list[NetworkDistance] = []
    for code in value:
        if isinstance(code, bool):
            continue
        key = str(code) if isinstance(code, int) else code
        if isinstance(key, str) and key in NETWORK_DISTANCE_CODES:
            distances.append(NETWORK_DISTANCE_CODES[key])
    return distances or None


def filter_profile_languages(value: Any) -> list[str] | None:
    """Keep only two-character language codes, without normalizing case."""
    if not is_non_empty_list(value):
        return None
    languages = [code for code in value if isinstance(code, str) and len(code) == 2]
    return languages or None


def is_flag_set(value: Any) -> bool:
    """Return True only for an explicit true flag."""
    return value is True or value == "true"


def coerce_job_offers(value: Any, lenient: bool = False) -> bool | None:
    """Coerce a has_job_offers value to a boolean.

    Args:
        value: True, False, "true" or "false" from the filter state.
        lenient: When True, any other present value counts as False instead
            of being dropped.

    Returns:
        The boolean to send, or None to leave the field out.
    """
    if value is None:
        return None
    if value is True or value == "true":
        return True
    if value is False or value == "false":
        return False
    return False if lenient else None
