"""
Configuration Loader
====================

Reads ``~/.dotty/config.yaml`` (or a file named with ``--config``) into a
:class:`CLIConfig`, and writes changes made with ``dotty config set`` or the
REPL ``/theme`` command back to the same file.
"""

import os
import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .schema import CLIConfig
from .defaults import DEFAULT_CONFIG_YAML, DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Finds, parses and persists the Dotty configuration.

    The first readable source wins: the ``--config`` path, then
    ``<config_dir>/config.yaml``, then built-in defaults. A file that does not
    parse, or does not hold a mapping, counts as defaults.
    """

    def __init__(self, config_path: Optional[str] = None, config_dir: Optional[str] = None):
        """
        Args:
            config_path: File given with ``--config``
            config_dir: Directory holding config.yaml (default: ~/.dotty)
        """
        self.config_path = config_path
        self._config_dir = config_dir or DEFAULT_CONFIG_DIR
        self._config: Optional[CLIConfig] = None
        self.source: Optional[Path] = None

    @property
    def config_dir(self) -> Path:
        return Path(os.path.expanduser(self._config_dir))

    @property
    def default_config_file(self) -> Path:
        return self.config_dir / DEFAULT_CONFIG_FILE

    def _candidates(self):
        if self.config_path:
            custom = Path(self.config_path).expanduser()
            if custom.exists():
                yield custom
            else:
                logger.warning(f"Config file not found: {custom}")
        if self.default_config_file.exists():
            yield self.default_config_file

    def load(self) -> CLIConfig:
        """Return the configuration, reading it on first use."""
        if self._config is not None:
            return self._config

        for path in self._candidates():
            self._config = self._read(path)
            self.source = path
            logger.info(f"Loaded config from: {path}")
            return self._config

        logger.info("No config file, using defaults")
        self._config = CLIConfig.default()
        return self._config

    def _read(self, path: Path) -> CLIConfig:
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"YAML parse error in {path}: {e}")
            return CLIConfig.default()
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            return CLIConfig.default()

        if not isinstance(data, dict):
            logger.error(f"Config in {path} is not a mapping, using defaults")
            return CLIConfig.default()
        return CLIConfig.from_dict(data)

    @property
    def target_file(self) -> Path:
        """File that :meth:`save` writes: the loaded file, else the default one."""
        if self.config_path:
            return Path(self.config_path).expanduser()
        return self.source or self.default_config_file

    def save(self, path: Optional[Path] = None) -> Path:
        """
        Write the current configuration as YAML.

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(path) if path else self.target_file
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            yaml.safe_dump(self.load().to_dict(), f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved config to: {path}")
        return path

    def create_default_config(self, force: bool = False) -> bool:
        """
        Write the commented default config.yaml.

        Returns:
            False if a file was already there and ``force`` was not given
        """
        path = self.target_file
        if path.exists() and not force:
            logger.info(f"Config file already exists: {path}")
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG_YAML)
        self._config = None
        logger.info(f"Created default config: {path}")
        return True

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key such as ``ui.theme``."""
        value: Any = self.load().to_dict()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def set(self, key: str, value: Any) -> bool:
        """
        Change a dotted key in memory. Call :meth:`save` to persist it.

        Returns:
            False if the key does not exist or the value is not accepted
        """
        data = self.load().to_dict()
        *parents, leaf = key.split(".")

        section = data
        for part in parents:
            section = section.get(part)
            if not isinstance(section, dict):
                logger.warning(f"Config key not found: {key}")
                return False
        if leaf not in section or isinstance(section[leaf], dict):
            logger.warning(f"Config key not found: {key}")
            return False

        section[leaf] = value
        updated = CLIConfig.from_dict(data)
        if updated.to_dict() != data:
            logger.warning(f"Rejected value {value!r} for {key}")
            return False

        self._config = updated
        return True

    @staticmethod
    def parse_value(raw: str) -> Any:
        """Read a command-line value as YAML, so "true" and "80" get their types."""
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError:
            return raw
