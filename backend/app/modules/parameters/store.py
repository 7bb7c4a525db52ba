"""Pure operations over a user's parameter map.

Every function takes the current map and returns a new one; the input is never
mutated, so a failed operation leaves the caller's state untouched. Errors are
raised as :class:`ParametersError` subclasses carrying a stable ``kind`` and a
human-readable message.
"""

from __future__ import annotations

from typing import Any, Mapping

ParameterMap = dict[str, Any]


class ParametersError(ValueError):
    kind = "ParametersError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFormat(ParametersError):
    kind = "InvalidFormat"

    def __init__(self) -> None:
        super().__init__("Invalid parameters format")


class MissingKey(ParametersError):
    kind = "MissingKey"

    def __init__(self) -> None:
        super().__init__("Parameter key is required")


class KeyNotFound(ParametersError):
    kind = "KeyNotFound"

    def __init__(self, key: str):
        super().__init__(f"Key '{key}' not found in parameters")
        self.key = key


def read(current: Mapping[str, Any]) -> ParameterMap:
    return dict(current)


def merge(current: Mapping[str, Any], patch: Any) -> ParameterMap:
    """Shallow-merge ``patch`` over ``current``.

    ``patch`` must be a JSON object. Keys in ``patch`` replace the same keys in
    ``current`` wholesale, including nested objects.
    """
    if not isinstance(patch, Mapping):
        raise InvalidFormat()
    return {**current, **patch}


def delete_key(current: Mapping[str, Any], key: Any) -> ParameterMap:
    """Return ``current`` without ``key``.

    The key is validated before membership is checked, so an empty key is
    always reported as missing rather than not found.
    """
    if not key or not isinstance(key, str):
        raise MissingKey()
    if key not in current:
        raise KeyNotFound(key)
    return {k: v for k, v in current.items() if k != key}
