import logging
import random

import stickwork.config
import stickwork.pattern


def test_missing_file_uses_defaults (tmp_path, caplog) -> None:

	"""A missing config file logs a warning and returns the defaults."""

	with caplog.at_level(logging.WARNING):
		config = stickwork.config.load_config(str(tmp_path / "missing.yaml"))

	assert config == stickwork.config.EngineConfig()
	assert "not found" in caplog.text


def test_load_engine_section (tmp_path) -> None:

	"""Settings may sit under an ``engine`` key."""

	path = tmp_path / "stickwork.yaml"
	path.write_text("engine:\n  practice_pad_mode: true\n  default_subdivision: 8\n")

	config = stickwork.config.load_config(str(path))

	assert config.practice_pad_mode is True
	assert config.default_subdivision == 8
	assert config.default_time_signature == "4/4"


def test_load_top_level_keys_and_ignore_unknown (tmp_path, caplog) -> None:

	"""Top-level keys work too, and unknown keys are ignored with a warning."""

	path = tmp_path / "stickwork.yaml"
	path.write_text("default_time_signature: 6/8\nalignment_tolerance: 0.001\ntempo: 120\n")

	with caplog.at_level(logging.WARNING):
		config = stickwork.config.load_config(str(path))

	assert config.default_time_signature == "6/8"
	assert config.alignment_tolerance == 0.001
	assert "tempo" in caplog.text


def test_empty_file_uses_defaults (tmp_path) -> None:

	"""An empty file is the same as no settings."""

	path = tmp_path / "stickwork.yaml"
	path.write_text("")

	assert stickwork.config.load_config(str(path)) == stickwork.config.EngineConfig()


def test_config_feeds_default_pattern (tmp_path) -> None:

	"""Loaded defaults shape a new pattern."""

	path = tmp_path / "stickwork.yaml"
	path.write_text("engine:\n  default_time_signature: 6/8\n  default_subdivision: 16\n")

	pattern = stickwork.pattern.default_pattern(stickwork.config.load_config(str(path)))

	assert pattern.notes_per_bar == 12


def test_practice_pad_config_feeds_default_pattern (tmp_path) -> None:

	"""A configured practice pad mode keeps the kick out of new patterns."""

	path = tmp_path / "stickwork.yaml"
	path.write_text("engine:\n  practice_pad_mode: true\n  default_sticking: R K\n")

	pattern = stickwork.pattern.default_pattern(stickwork.config.load_config(str(path)), rng=random.Random(4))

	assert "K" not in stickwork.pattern.expand_sticking(pattern)
	assert set(stickwork.pattern.expand_voicing(pattern)) == {"S"}
