"""Configuration management for matelink."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

from matelink.constants import (
    DEFAULT_LOWER_BOUND,
    DEFAULT_UPPER_BOUND,
    DEFAULT_WINDOW_LENGTH,
)
from matelink.exceptions import ConfigurationError


@dataclass
class LinkConfig:
    """Linkage parameters."""

    lower: int = DEFAULT_LOWER_BOUND
    # Negative disables the upper bound
    upper: int = DEFAULT_UPPER_BOUND
    # Sizes the scan windows and sets the end-classification thresholds
    window_length: int = DEFAULT_WINDOW_LENGTH


@dataclass
class RuntimeConfig:
    """Runtime configuration."""

    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    # Enable tqdm progress over contigs
    enable_progress: bool = True
    # Warn and skip unknown contig names instead of aborting the run
    skip_missing: bool = False


@dataclass
class PerformanceConfig:
    """Performance-related configuration."""

    # BGZF decompression threads handed to pysam
    threads: int = 1


@dataclass
class Config:
    """Main configuration class."""

    # Required parameters (set via CLI or config file)
    bam: Optional[Path] = None
    index: Optional[Path] = None
    references: Optional[Path] = None
    # None means stdout
    output: Optional[Path] = None

    # Sub-configurations
    link: LinkConfig = field(default_factory=LinkConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    # Convenience properties
    @property
    def threads(self) -> int:
        return self.performance.threads

    @threads.setter
    def threads(self, value: int):
        self.performance.threads = value

    def validate(self) -> None:
        """Validate configuration.

        Only presence and numeric ranges are checked here; whether the files
        can actually be opened is reported when they are opened.
        """
        if not self.bam:
            raise ConfigurationError("Alignment file (--bam) is required")
        if not self.index:
            raise ConfigurationError("Alignment index (--index) is required")
        if not self.references:
            raise ConfigurationError("Reference name list (--references) is required")

        if self.link.window_length < 1:
            raise ConfigurationError(
                f"window_length must be >= 1, got {self.link.window_length}"
            )
        if self.performance.threads < 1:
            raise ConfigurationError("Threads must be >= 1")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""

        def path_to_str(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, dict):
                return {k: path_to_str(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [path_to_str(item) for item in obj]
            return obj

        return path_to_str(asdict(self))


_PATH_KEYS = ("bam", "index", "references", "output")
_SECTIONS = ("link", "runtime", "performance")


def load_config(path: Path) -> Config:
    """Load configuration from YAML file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    def build_config(data: Dict[str, Any]) -> Config:
        cfg = Config()

        unknown = sorted(set(data) - set(_PATH_KEYS) - set(_SECTIONS))
        if unknown:
            raise ConfigurationError("Unsupported config option(s): " + ", ".join(unknown))

        # Direct attributes
        for key in _PATH_KEYS:
            if data.get(key) is not None:
                setattr(cfg, key, Path(data[key]))

        # Sub-configs
        for section in _SECTIONS:
            values = data.get(section)
            if not values:
                continue
            target = getattr(cfg, section)
            for key, value in values.items():
                if not hasattr(target, key):
                    raise ConfigurationError(f"Unsupported config option: {section}.{key}")
                if key == "log_file" and value:
                    value = Path(value)
                setattr(target, key, value)

        return cfg

    return build_config(data)
