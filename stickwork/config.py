import dataclasses
import logging
import os
import typing

import yaml

import stickwork.constants.subdivisions
import stickwork.polyrhythm_positions


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class EngineConfig:

	"""
	Settings shared by every engine call in an editing session.

	Parameters:
		practice_pad_mode: Voicing is locked to snare and sticking never uses the kick
		alignment_tolerance: Polyrhythm coincidence tolerance, in beats
		default_time_signature: Time signature of new patterns
		default_subdivision: Subdivision of new patterns
		default_sticking: Sticking cell of new patterns
	"""

	practice_pad_mode: bool = False
	alignment_tolerance: float = stickwork.polyrhythm_positions.ALIGNMENT_TOLERANCE
	default_time_signature: str = "4/4"
	default_subdivision: int = stickwork.constants.subdivisions.DEFAULT_SUBDIVISION
	default_sticking: str = "R L"

	@classmethod
	def from_dict (cls, data: typing.Optional[typing.Dict[str, typing.Any]]) -> "EngineConfig":

		"""Build a config from a mapping, ignoring keys it does not know."""

		known = {field.name for field in dataclasses.fields(cls)}
		values = {key: value for key, value in (data or {}).items() if key in known}

		unknown = set(data or {}) - known
		if unknown:
			logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

		return cls(**values)


def load_config (config_path: str = 'stickwork.yaml') -> EngineConfig:

	"""
	Load engine settings from a YAML file.

	A missing file is not an error: the defaults are used.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return EngineConfig()

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	return EngineConfig.from_dict(data.get('engine', data) if isinstance(data, dict) else None)
