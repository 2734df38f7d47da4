"""${ENV_VAR} substitution for raw YAML scenario data."""

import os
import re
from collections.abc import Iterator

_ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _strings(data: RawValue) -> Iterator[str]:
    if isinstance(data, str):
        yield data
    elif isinstance(data, list):
        for item in data:
            yield from _strings(item)
    elif isinstance(data, dict):
        for value in data.values():
            yield from _strings(value)


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset, in first-seen order."""
    missing: list[str] = []
    for text in _strings(data):
        for name in _ENV_REFERENCE.findall(text):
            if name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Substitute each ${ENV_VAR} with its value; all referenced vars must be set."""
    if isinstance(data, str):
        return _ENV_REFERENCE.sub(lambda match: os.environ[match.group(1)], data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
