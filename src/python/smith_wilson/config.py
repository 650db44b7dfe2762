"""
Configuration for the Smith-Wilson curve engine.

Settings come from three layers, later ones winning:
    defaults  ->  JSON/YAML file  ->  SW_* environment variables

Example config.yaml:
    curve:
      ufr: 0.036
      alpha: 0.1
      targets: "1:120"
    solver:
      method: cholesky
    logging:
      level: DEBUG
      file: smith_wilson.log
"""

import os
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)


@dataclass
class CurveConfig:
    """Smith-Wilson curve parameters."""
    ufr: float = 0.042  # Ultimate forward rate
    alpha: float = 0.142068  # Convergence speed
    targets: str = "1:65"  # Default target maturities (see parse_maturities)
    forward_tenor: float = 1.0  # Tenor of reported forward rates (years)


@dataclass
class SolverConfig:
    """Linear solver settings."""
    method: str = "lu"  # inverse, lu, cholesky
    max_condition: float = 1e12


@dataclass
class LoggingConfig:
    """Log level, format and optional rotating log file."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    max_bytes: int = 5_000_000
    backup_count: int = 3


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# variable -> (section, attribute, converter); section None means top level
ENV_VARS: Dict[str, Tuple[Optional[str], str, Callable[[str], Any]]] = {
    "SW_UFR": ("curve", "ufr", float),
    "SW_ALPHA": ("curve", "alpha", float),
    "SW_SOLVER": ("solver", "method", str.lower),
    "SW_MAX_CONDITION": ("solver", "max_condition", float),
    "SW_DEBUG": (None, "debug", _parse_bool),
    "SW_LOG_LEVEL": ("logging", "level", str.upper),
    "SW_LOG_FILE": ("logging", "file", str),
}

_SECTIONS = {
    "curve": CurveConfig,
    "solver": SolverConfig,
    "logging": LoggingConfig,
}


@dataclass
class Config:
    """Curve, solver and logging settings."""
    curve: CurveConfig = field(default_factory=CurveConfig)
    solver: SolverConfig = field(default_factory=SolverConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    debug: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """
        Build a config from a nested dictionary.

        Missing sections keep their defaults. Unknown keys inside a section
        raise TypeError from the section dataclass.
        """
        config = cls()
        for name, section_cls in _SECTIONS.items():
            if data.get(name):
                setattr(config, name, section_cls(**data[name]))
        if "debug" in data:
            config.debug = bool(data["debug"])

        unknown = set(data) - set(_SECTIONS) - {"debug"}
        if unknown:
            logger.warning(f"Ignoring unknown config sections: {sorted(unknown)}")
        return config

    @classmethod
    def from_file(cls, path: str) -> "Config":
        """Read a JSON file, or YAML when the suffix is .yaml/.yml."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Config file not found: {path}")

        text = path.read_text()
        if path.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)

        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls) -> "Config":
        """Defaults overridden by any SW_* variables that are set."""
        return cls().apply_env()

    def apply_env(self) -> "Config":
        """Override fields in place from SW_* variables; returns self."""
        for var, (section, attr, convert) in ENV_VARS.items():
            raw = os.getenv(var)
            if not raw:
                continue
            target = self if section is None else getattr(self, section)
            setattr(target, attr, convert(raw))
            logger.debug(f"{var} overrides {section or 'config'}.{attr}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Nested dictionary accepted by from_dict."""
        return asdict(self)

    def save(self, path: str) -> None:
        """Write the config as JSON."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2) + "\n")


def load_config(
    config_file: Optional[str] = None,
    use_env: bool = True
) -> Config:
    """
    Load configuration.

    A config file that does not exist is logged and skipped, so the CLI can
    point at an optional default location.
    """
    config = Config()

    if config_file:
        try:
            config = Config.from_file(config_file)
            logger.info(f"Loaded config from {config_file}")
        except FileNotFoundError:
            logger.warning(f"Config file {config_file} not found, using defaults")

    if use_env:
        config.apply_env()

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Route package logging according to ``config``.

    Adds a console handler when the root logger has none and a rotating
    file handler when ``config.file`` is set.
    """
    root = logging.getLogger()
    level = getattr(logging, config.level.upper())
    formatter = logging.Formatter(config.format)

    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    if config.file:
        file_handler = RotatingFileHandler(
            config.file,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if root.level == logging.NOTSET or root.level > level:
        root.setLevel(level)
