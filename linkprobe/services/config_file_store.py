import os
from typing import Optional

import yaml

from linkprobe.exceptions import ConfigFileError

DEFAULT_CONFIG_FILES = (
    "linkprobe.config.json",
    "linkprobe.config.yaml",
    "linkprobe.config.yml",
)


class ConfigFileStore:
    """Filesystem IO for linkprobe config files.

    Responsibility: locate, read, and parse config files on disk. JSON files
    are read with the YAML loader, which accepts JSON documents as well.
    """

    def __init__(self, *, base_dir: Optional[str] = None):
        self.base_dir = base_dir or os.getcwd()

    def _resolve_path(self, config_path: str) -> str:
        return config_path if os.path.isabs(config_path) else os.path.join(self.base_dir, config_path)

    def find_default(self) -> Optional[str]:
        """Return the first default config file present in `base_dir`, if any."""
        for fname in DEFAULT_CONFIG_FILES:
            full_path = self._resolve_path(fname)
            if os.path.isfile(full_path):
                return full_path
        return None

    def load_dict(self, config_path: str) -> dict:
        """Return the parsed mapping stored at `config_path`.

        Raises `ConfigFileError` when the file is missing, unreadable, or
        does not hold a mapping.
        """
        full_path = self._resolve_path(config_path)
        if not os.path.isfile(full_path):
            raise ConfigFileError(config_path)
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigFileError(config_path, f"could not be parsed: {e}") from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigFileError(config_path, "must contain a mapping of options")
        return data
