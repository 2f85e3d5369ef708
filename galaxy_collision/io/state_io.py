"""State I/O for saving and loading simulation states."""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import numpy as np

from galaxy_collision.exceptions import InvariantViolation
from galaxy_collision.physics.configuration import Configuration
from galaxy_collision.physics.state import SimulationState


def _state_metadata(state: SimulationState, configuration: Optional[Configuration], metadata):
    meta = {
        'time': state.time,
        'steps': state.step_count,
        'time_step': state.time_step,
        'time_direction': state.time_direction,
    }
    if configuration is not None:
        meta['configuration'] = json.dumps(asdict(configuration))
    meta.update(metadata or {})
    return meta


def save_state(
    state: SimulationState,
    output_path: str,
    configuration: Optional[Configuration] = None,
    metadata: Optional[Dict[str, Any]] = None
):
    """Save simulation state to file.

    Args:
        state: Running simulation state
        output_path: Output file path (.npz or .json)
        configuration: Optional configuration the state was generated from
        metadata: Optional extra metadata dictionary
    """
    if not state.initialized:
        raise InvariantViolation("Cannot save a simulation that has not started")

    output_path = Path(output_path)
    meta = _state_metadata(state, configuration, metadata)

    if output_path.suffix == '.npz':
        # NumPy compressed format
        save_dict = {
            'positions': state.positions,
            'velocities': state.velocities,
            'core_masses': state.core_masses
        }
        for key, value in meta.items():
            if isinstance(value, (int, float, str)):
                save_dict[f'metadata_{key}'] = value
        np.savez_compressed(output_path, **save_dict)

    elif output_path.suffix == '.json':
        # JSON format (less efficient but human-readable)
        state_dict = {
            'positions': state.positions.tolist(),
            'velocities': state.velocities.tolist(),
            'core_masses': state.core_masses.tolist(),
            'metadata': meta
        }
        with open(output_path, 'w') as f:
            json.dump(state_dict, f, indent=2)

    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .npz or .json")


def load_state(input_path: str) -> Tuple[np.ndarray, np.ndarray, np.ndarray, Dict[str, Any]]:
    """Load simulation state from file.

    Args:
        input_path: Input file path

    Returns:
        Tuple of (positions, velocities, core_masses, metadata)
    """
    input_path = Path(input_path)

    if input_path.suffix == '.npz':
        with np.load(input_path) as data:
            positions = data['positions']
            velocities = data['velocities']
            core_masses = data['core_masses']

            metadata = {}
            for key in data.keys():
                if key.startswith('metadata_'):
                    metadata[key[len('metadata_'):]] = data[key].item()

    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            state_dict = json.load(f)

        positions = np.array(state_dict['positions'], dtype=float)
        velocities = np.array(state_dict['velocities'], dtype=float)
        core_masses = np.array(state_dict['core_masses'], dtype=float)
        metadata = state_dict.get('metadata', {})

    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .npz or .json")

    return positions, velocities, core_masses, metadata


def load_configuration(metadata: Dict[str, Any]) -> Optional[Configuration]:
    """Configuration stored by `save_state`, if any."""
    stored = metadata.get('configuration')
    if stored is None:
        return None
    data = json.loads(stored)
    return Configuration(
        rings_per_galaxy=tuple(data['rings_per_galaxy']),
        ring_separation=data['ring_separation'],
        minimal_galaxy_separation=data['minimal_galaxy_separation'],
        inclination_angles=tuple(data['inclination_angles']),
        core_masses=tuple(data['core_masses']),
        eccentricity=data['eccentricity']
    )
