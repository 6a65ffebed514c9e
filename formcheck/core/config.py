"""Layered settings for formcheck.

Defaults, TOML files and `FORMCHECK_*` environment variables are merged
into one nested dict that is read with dotted keys such as
`validators.Password.min_length`.
"""

import copy
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

# Per-user settings, edited by `formcheck config set`.
USER_CONFIG_PATH = Path.home() / ".config" / "formcheck" / "config.toml"

# The project-level configuration file, looked up in the working directory.
PROJECT_CONFIG_NAME = "formcheck.toml"


class Config:
    """The merged settings used by the CLI and by `validate_form`.

    Sources, from lowest to highest priority:
    1.  `DEFAULT_CONFIG`.
    2.  Project-specific `formcheck.toml` file.
    3.  User-level `~/.config/formcheck/config.toml` file.
    4.  A custom configuration file specified at runtime, used instead of
        the two files above.
    5.  `FORMCHECK_*` environment variables (see `ENV_MAPPING`).

    Per-validator option defaults live under `validators.<Name>`, for
    example `validators.Password.min_length = 12`. Setting
    `validators.<Name>.enabled = false` turns a validator off for forms.

    Attributes:
        DEFAULT_CONFIG (Dict[str, Any]): The settings used when no source
            overrides them.
    """

    DEFAULT_CONFIG: Dict[str, Any] = {
        "verbose": False,
        "output": "table",  # Can be "table" or "json".
        "disable_validators": [],
        "enable_validators": [],  # Non-empty means an allow-list.
        "validators": {},
    }

    ENV_MAPPING = {
        "FORMCHECK_VERBOSE": "verbose",
        "FORMCHECK_OUTPUT": "output",
        "FORMCHECK_DISABLE_VALIDATORS": "disable_validators",
        "FORMCHECK_ENABLE_VALIDATORS": "enable_validators",
    }

    def __init__(self, config_path: Optional[Path] = None, load_files: bool = True) -> None:
        """Builds the merged settings.

        Args:
            config_path (Optional[Path]): A TOML file to read instead of
                the project and user files.
            load_files (bool): If False, only defaults and environment
                variables are used.
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        if load_files:
            if config_path:
                self._load_file_config(Path(config_path))
            else:
                self._load_default_configs()
        self._load_env_config()

    def _load_default_configs(self) -> None:
        """Reads `./formcheck.toml`, then the user file, skipping any that are missing."""
        project_config = Path.cwd() / PROJECT_CONFIG_NAME
        if project_config.exists():
            self._load_file_config(project_config)

        if USER_CONFIG_PATH.exists():
            self._load_file_config(USER_CONFIG_PATH)

    @staticmethod
    def _merge_configs(base: Dict[str, Any], new: Dict[str, Any]) -> None:
        """Overlays `new` onto `base` in place, descending into nested tables.

        Tables present on both sides are merged key by key; any other value
        from `new` replaces what `base` had.
        """
        for key, value in new.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                Config._merge_configs(base[key], value)
            else:
                base[key] = value

    def _load_file_config(self, config_path: Path) -> None:
        """Overlays the settings of one TOML file.

        An unreadable or malformed file is reported on stderr and skipped,
        so a broken user file never stops validation.
        """
        try:
            with open(config_path, "rb") as f:
                file_config = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            print(f"Warning: Could not load config from {config_path}: {e}", file=sys.stderr)
            return
        self._merge_configs(self.config, file_config)

    def _load_env_config(self) -> None:
        """Applies the `FORMCHECK_*` variables listed in `ENV_MAPPING`."""
        for env_var, config_key in self.ENV_MAPPING.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_from_env(config_key, value)

    def _set_from_env(self, key_path: str, value: str) -> None:
        """Stores an environment string under `key_path`, cast to the key's type.

        Flags accept true/1/yes/on; validator lists are comma-separated.
        """
        leaf_key = key_path.split('.')[-1]

        if leaf_key in ("verbose", "enabled"):
            self.set(key_path, value.lower() in ("true", "1", "yes", "on"))
        elif leaf_key in ("disable_validators", "enable_validators"):
            self.set(key_path, [v.strip() for v in value.split(",") if v.strip()])
        else:
            self.set(key_path, value)

    def get(self, key: str, default: Any = None) -> Any:
        """Looks up a setting by dotted path.

        Args:
            key (str): A path such as "output" or "validators.Text.required".
            default (Any): Returned when any segment of the path is missing.

        Returns:
            Any: The stored value, or `default`.
        """
        value: Any = self.config
        try:
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Stores a setting by dotted path, for this process only.

        Missing intermediate tables are created. Use `set_user_value` to
        persist a setting.
        """
        _set_path(self.config, key, value)

    def validator_options(self, validator_name: str) -> Dict[str, Any]:
        """Returns the configured option defaults for a validator.

        Args:
            validator_name (str): The validator's `name` attribute.

        Returns:
            Dict[str, Any]: The options from `validators.<validator_name>`,
            without the `enabled` switch.
        """
        table = self.get(f"validators.{validator_name}", {})
        if not isinstance(table, dict):
            return {}
        return {key: value for key, value in table.items() if key != "enabled"}

    def is_validator_enabled(self, validator_name: str) -> bool:
        """Decides whether forms should run the named validator.

        `validators.<name>.enabled = false` always wins. Otherwise a
        non-empty `enable_validators` acts as an allow-list, and failing
        that `disable_validators` acts as a deny-list.
        """
        if self.get(f"validators.{validator_name}.enabled") is False:
            return False

        allowed = self.get("enable_validators", [])
        if allowed:
            return validator_name in allowed
        return validator_name not in self.get("disable_validators", [])

    @staticmethod
    def _get_user_config() -> Dict[str, Any]:
        """Reads the user file as-is, or returns {} if it is absent or unreadable."""
        if not USER_CONFIG_PATH.exists():
            return {}
        try:
            with open(USER_CONFIG_PATH, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            return {}

    @staticmethod
    def set_user_value(key: str, value: Any) -> None:
        """Persists one setting in the user config file.

        Only the user file's own contents are read and rewritten. Settings
        that came from a project file or from the environment are never
        copied into it.

        Args:
            key (str): The dotted path to set.
            value (Any): The value to store.

        Raises:
            IOError: If the configuration file cannot be written.
        """
        user_config = Config._get_user_config()
        _set_path(user_config, key, value)
        try:
            USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with open(USER_CONFIG_PATH, "wb") as f:
                tomli_w.dump(user_config, f)
        except OSError as e:
            raise IOError(f"Failed to save configuration to {USER_CONFIG_PATH}: {e}") from e

    @staticmethod
    def reset_user_config() -> bool:
        """Deletes the user config file.

        Returns:
            bool: True if a file was removed, False if there was none.
        """
        if not USER_CONFIG_PATH.exists():
            return False
        USER_CONFIG_PATH.unlink()
        return True

    def __str__(self) -> str:
        return f"Config({self.config})"


def _set_path(table: Dict[str, Any], key: str, value: Any) -> None:
    """Sets `value` at a dotted path inside `table`, creating tables on the way."""
    keys = key.split('.')
    for k in keys[:-1]:
        if not isinstance(table.get(k), dict):
            table[k] = {}
        table = table[k]
    table[keys[-1]] = value
