"""Tests for configuration loading and validation."""

import json
import math

import pytest
import yaml

from galaxy_collision.exceptions import ConfigurationError
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.simulator import Simulator
from galaxy_collision.utils.config import Config, config_from_dict, load_config, save_config


def test_default_configuration():
    configuration = Configuration().validate()

    assert configuration.rings_per_galaxy == (5, 5)
    assert configuration.ring_separation == 3.0
    assert configuration.minimal_galaxy_separation == 25.0
    assert configuration.inclination_angles_degrees == pytest.approx((60.0, 60.0))
    assert configuration.core_masses == (1.0, 1.0)
    assert configuration.eccentricity == 0.6


def test_from_degrees():
    configuration = Configuration.from_degrees((90.0, 45.0), eccentricity=0.1)

    assert configuration.inclination_angles == pytest.approx((math.pi / 2, math.pi / 4))
    assert configuration.eccentricity == 0.1


def test_configuration_is_immutable():
    configuration = Configuration()
    with pytest.raises(AttributeError):
        configuration.eccentricity = 0.5


def test_config_to_configuration():
    config = Config(rings_per_galaxy=[3, 4], core_masses=[2.0, 0.5], eccentricity=0.0)
    configuration = config.to_configuration()

    assert configuration.rings_per_galaxy == (3, 4)
    assert configuration.core_masses == (2.0, 0.5)
    assert configuration.inclination_angles == pytest.approx((math.pi / 3, math.pi / 3))


def test_config_to_configuration_validates():
    with pytest.raises(ConfigurationError):
        Config(eccentricity=1.0).to_configuration()


def test_save_load_json(tmp_path):
    config = Config(rings_per_galaxy=[2, 3], eccentricity=0.2, integrator="verlet")
    path = tmp_path / "config.json"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config
    assert json.loads(path.read_text())["eccentricity"] == 0.2


def test_save_load_yaml(tmp_path):
    config = Config(core_masses=[1.0, 0.7], colors=[[255, 0, 0], [0, 0, 255]])
    path = tmp_path / "config.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config
    assert yaml.safe_load(path.read_text())["core_masses"] == [1.0, 0.7]


def test_partial_yaml_uses_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("eccentricity: 0.4\nrings_per_galaxy: [1, 2]\n")

    config = load_config(str(path))

    assert config.eccentricity == 0.4
    assert config.rings_per_galaxy == [1, 2]
    assert config.ring_separation == 3.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(str(path)) == Config()


def test_unknown_keys_are_rejected():
    with pytest.raises(ConfigurationError, match="numberOfRings"):
        config_from_dict({"numberOfRings": [5, 5]})


def test_non_mapping_is_rejected():
    with pytest.raises(ConfigurationError):
        config_from_dict([1, 2])


def test_unsupported_format(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("eccentricity = 0.1\n")

    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("changes", [
    {"rings_per_galaxy": 5},
    {"rings_per_galaxy": "55"},
    {"core_masses": None},
    {"inclination_angles_degrees": 30.0},
])
def test_scalar_pairs_are_rejected(changes):
    with pytest.raises(ConfigurationError):
        Config(**changes).to_configuration()


@pytest.mark.parametrize("fps", ["sixty", None, [60], True])
def test_non_numeric_refresh_rate_is_rejected(fps):
    with pytest.raises(ConfigurationError):
        Simulator.from_config(Config(screen_refresh_rate_fps=fps))


def test_unknown_integrator_type_is_rejected():
    with pytest.raises(ConfigurationError):
        Simulator.from_config(Config(integrator=["euler"]))
