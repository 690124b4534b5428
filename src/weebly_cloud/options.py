"""
Sparse option filtering for partial update payloads

Optional fields are sent only when the caller supplied a non-blank value.
A missing field and a blank one are treated the same, so these helpers
cannot be used to clear a remote field to an empty value.
"""

from typing import Any, Dict, Iterable, Mapping, Optional


def is_blank(value: Any) -> bool:
    """
    Check whether an option value counts as "not supplied".

    None, the empty string and empty collections are blank. Whitespace-only
    strings, False and 0 are real values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def compact_options(
    options: Optional[Mapping[str, Any]],
    allowed: Iterable[str]
) -> Dict[str, Any]:
    """
    Keep the non-blank options named in allowed.

    The result follows the order of allowed, not the caller's order, so the
    serialized body is stable for a given set of values.

    Args:
        options: Caller-supplied options (may be None)
        allowed: Recognized field names in payload order

    Returns:
        dict: Filtered options
    """
    if not options:
        return {}
    return {
        name: options[name]
        for name in allowed
        if name in options and not is_blank(options[name])
    }


def merge_payload(
    required: Mapping[str, Any],
    options: Optional[Mapping[str, Any]],
    allowed: Iterable[str]
) -> Dict[str, Any]:
    """
    Build a request payload from required fields and filtered options.

    Required fields are always included, even when blank.

    Args:
        required: Required fields in payload order
        options: Caller-supplied optional fields
        allowed: Recognized optional field names

    Returns:
        dict: Payload ready for serialization
    """
    payload = dict(required)
    for name, value in compact_options(options, allowed).items():
        payload.setdefault(name, value)
    return payload
