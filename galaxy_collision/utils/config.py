"""Configuration management."""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import List, Optional

import yaml

from galaxy_collision.exceptions import ConfigurationError
from galaxy_collision.physics.configuration import Configuration


@dataclass
class Config:
    """Run configuration: galaxy parameters plus driver and rendering options."""
    # Galaxy parameters
    rings_per_galaxy: List[int] = field(default_factory=lambda: [5, 5])
    ring_separation: float = 3.0
    minimal_galaxy_separation: float = 25.0
    inclination_angles_degrees: List[float] = field(default_factory=lambda: [60.0, 60.0])
    core_masses: List[float] = field(default_factory=lambda: [1.0, 1.0])
    eccentricity: float = 0.6

    # Simulation parameters
    integrator: str = "euler"
    screen_refresh_rate_fps: float = 60.0
    steps: int = 1000

    # Rendering parameters
    colors: List[List[int]] = field(default_factory=lambda: [[255, 127, 0], [0, 100, 255]])
    render: bool = False

    # Export parameters
    save_state: Optional[str] = None

    def to_configuration(self) -> Configuration:
        """Galaxy parameters as a validated `Configuration`."""
        return Configuration.from_degrees(
            inclination_angles_degrees=_pair('inclination_angles_degrees', self.inclination_angles_degrees),
            rings_per_galaxy=_pair('rings_per_galaxy', self.rings_per_galaxy),
            ring_separation=self.ring_separation,
            minimal_galaxy_separation=self.minimal_galaxy_separation,
            core_masses=_pair('core_masses', self.core_masses),
            eccentricity=self.eccentricity
        ).validate()


def _pair(name: str, value) -> tuple:
    # A scalar or a string in a config file is never a valid per-galaxy pair
    if isinstance(value, (str, bytes)):
        raise ConfigurationError(f"{name} must be a list of two values, got {value!r}")
    try:
        return tuple(value)
    except TypeError as e:
        raise ConfigurationError(f"{name} must be a list of two values, got {value!r}") from e


def config_from_dict(data: dict) -> Config:
    """Build a Config, rejecting keys it does not know."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config must be a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Config)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {unknown}. Available: {sorted(known)}")

    return Config(**data)


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config format: {config_path.suffix}. Use .json or .yaml"
            )

    return config_from_dict(data or {})


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
