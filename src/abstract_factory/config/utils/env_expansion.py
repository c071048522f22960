"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any

# ${VAR:default}
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings support ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Dictionaries
    and lists are expanded recursively; other values are returned unchanged.
    Unset variables without a default are left as written.
    """
    if isinstance(value, str):
        value = _DEFAULT_PATTERN.sub(
            lambda match: os.environ.get(match.group(1), match.group(2)), value
        )
        return os.path.expandvars(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value
