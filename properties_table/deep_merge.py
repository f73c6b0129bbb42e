"""Logic for layering a user configuration over the defaults."""

from typing import Any

ADDITIVE_KEYS = frozenset({"title_keys"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``, neither input is modified.

    Nested mappings such as ``styles`` and ``selectors`` are overlaid key by
    key, any other value in ``update`` takes the place of the default. Lists
    under ``title_keys`` are extended instead: new synonyms are appended after
    the defaults and ones already present are not repeated.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result
