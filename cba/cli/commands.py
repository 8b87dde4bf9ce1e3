"""CLI Commands"""

from cba.config import (
    DEFAULT_MODEL_ID,
    MODEL_ID_VAR,
    ConfigError,
    ConfigStore,
    resolve_key,
)
from cba.output import print_config, print_success


def _format_value(key: str, value: str | None) -> str:
    if value:
        return value
    if key == MODEL_ID_VAR:
        return f"Not set (default: {DEFAULT_MODEL_ID})"
    return "Not set"


def display_config(store: ConfigStore, key: str | None = None) -> int:
    """Print one entry, or every entry when no key is given."""
    if key:
        full_key = resolve_key(key)
        print_success(f"{full_key}: {_format_value(full_key, store.get(full_key))}")
        return 0

    entries = {name: _format_value(name, value) for name, value in store.get().items()}
    print_config(entries, store.path)
    return 0


def run_config(action: str | None, key: str | None = None, value: str | None = None,
               store: ConfigStore | None = None) -> int:
    """Handle `cba config get|set`. Raises ConfigError on bad input."""
    store = store or ConfigStore()

    if action == 'get':
        return display_config(store, key)

    if action == 'set':
        full_key = store.set(key, value)
        print_success(f"Set {full_key} successfully")
        return 0

    raise ConfigError('Action must be "get" or "set"')
