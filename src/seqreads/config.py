"""Configuration management for seqreads."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

import yaml

from .exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoaderConfig:
    """Read loader configuration settings."""

    app_name: str = "seqreads"
    data_dir: Optional[Path] = None
    temp_subdir: str = "tempGz"
    validate_lengths: bool = True
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.data_dir is not None:
            self.data_dir = Path(self.data_dir)

        if not self.app_name or not self.app_name.strip():
            raise ConfigurationError("app_name must not be empty", parameter="app_name")

        if not self.temp_subdir or Path(self.temp_subdir).name != self.temp_subdir:
            raise ConfigurationError(
                f"temp_subdir must be a plain directory name: {self.temp_subdir!r}",
                parameter="temp_subdir",
            )

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}", parameter="log_level")

    @classmethod
    def from_yaml(cls, yaml_file: Path) -> "LoaderConfig":
        """Load configuration from YAML file."""
        yaml_file = Path(yaml_file)
        if not yaml_file.exists():
            raise ConfigurationError(f"Config file not found: {yaml_file}")

        try:
            with open(yaml_file, 'r') as f:
                data = yaml.safe_load(f) or {}

            if not isinstance(data, dict):
                raise ConfigurationError("Top level must be a mapping", config_file=str(yaml_file))

            if data.get('data_dir') is not None:
                data['data_dir'] = Path(data['data_dir']).expanduser()

            return cls(**data)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML config: {e}", config_file=str(yaml_file))
        except TypeError as e:
            raise ConfigurationError(f"Invalid config parameters: {e}", config_file=str(yaml_file))

    @classmethod
    def from_args(cls, args: dict, base: Optional["LoaderConfig"] = None) -> "LoaderConfig":
        """
        Create configuration from command-line arguments.

        Arguments that are present and not None override the values of
        ``base`` (for example a configuration loaded from YAML).
        """
        arg_mapping = {
            'app_name': 'app_name',
            'data_dir': 'data_dir',
            'log_level': 'log_level',
        }

        config_args = asdict(base) if base is not None else {}
        for arg_name, config_name in arg_mapping.items():
            if arg_name in args and args[arg_name] is not None:
                config_args[config_name] = args[arg_name]

        if args.get('no_length_check') is not None:
            config_args['validate_lengths'] = not args['no_length_check']

        return cls(**config_args)
