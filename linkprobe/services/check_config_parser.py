import logging
from typing import Optional

from linkprobe.domain.config import CheckConfig
from linkprobe.exceptions import ConfigFileError

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"recurse", "skip", "format", "silent", "port"}
FORMATS = ("json", "csv")


class CheckConfigParser:
    """Parse a config-file dict into a CheckConfig.

    Responsibility: schema/validation for config files.
    It does NOT perform filesystem IO.
    """

    def _parse_skip(self, config_path: str, value) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(x for x in value.split(" ") if x)
        if isinstance(value, list) and all(isinstance(x, str) for x in value):
            return tuple(value)
        raise ConfigFileError(config_path, "has an invalid 'skip' (expected a string or list of strings)")

    def _parse_bool(self, config_path: str, key: str, value) -> Optional[bool]:
        if value is None or isinstance(value, bool):
            return value
        raise ConfigFileError(config_path, f"has an invalid {key!r} (expected true or false)")

    def _parse_format(self, config_path: str, value) -> Optional[str]:
        if value is None:
            return None
        fmt = str(value).strip().lower()
        if fmt not in FORMATS:
            raise ConfigFileError(config_path, f"has an unknown format {value!r}")
        return fmt

    def _parse_port(self, config_path: str, value) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int) or not 0 < value < 65536:
            raise ConfigFileError(config_path, f"has an invalid port {value!r}")
        return value

    def parse(self, *, config_path: str, data: dict) -> CheckConfig:
        unknown = set(data) - KNOWN_KEYS
        if unknown:
            logger.warning("Ignoring unknown keys in %s: %s", config_path, ", ".join(sorted(unknown)))

        return CheckConfig(
            config_path=config_path,
            recurse=self._parse_bool(config_path, "recurse", data.get("recurse")),
            skip=self._parse_skip(config_path, data.get("skip")),
            format=self._parse_format(config_path, data.get("format")),
            silent=self._parse_bool(config_path, "silent", data.get("silent")),
            port=self._parse_port(config_path, data.get("port")),
        )
