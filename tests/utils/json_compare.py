from typing import Any, Iterable


def exclude_keys(data: Any, keys: Iterable[str]) -> Any:
    """Drop volatile keys (ids, timestamps) at every nesting level"""
    keys = set(keys)
    if isinstance(data, dict):
        return {k: exclude_keys(v, keys) for k, v in data.items() if k not in keys}
    if isinstance(data, list):
        return [exclude_keys(item, keys) for item in data]
    return data
