import random

import pytest

import stickwork.sequence_utils


def test_tile_exact_length () -> None:

	"""A short cell repeats cyclically to the requested length."""

	assert stickwork.sequence_utils.tile(["R", "L", "L"], 7) == ["R", "L", "L", "R", "L", "L", "R"]


def test_tile_truncates_and_handles_empty () -> None:

	"""A long cell is cut and an empty cell gives nothing."""

	assert stickwork.sequence_utils.tile([1, 2, 3, 4], 2) == [1, 2]
	assert stickwork.sequence_utils.tile([], 4) == []


def test_resolve_rng () -> None:

	"""A given generator is returned as is; None gives a fresh one."""

	rng = random.Random(1)

	assert stickwork.sequence_utils.resolve_rng(rng) is rng
	assert isinstance(stickwork.sequence_utils.resolve_rng(None), random.Random)


def test_choose_hand () -> None:

	"""Hands are right or left, and both appear."""

	rng = random.Random(5)
	hands = {stickwork.sequence_utils.choose_hand(rng) for _ in range(50)}

	assert hands == {"R", "L"}


# --- weighted_choice ---


def test_weighted_choice_single_option () -> None:

	"""A single option should always be returned."""

	rng = random.Random(0)
	result = stickwork.sequence_utils.weighted_choice([(16, 1.0)], rng)

	assert result == 16


def test_weighted_choice_respects_weights () -> None:

	"""Over many trials, heavy-weighted options should appear more often."""

	rng = random.Random(42)
	counts = {"heavy": 0, "light": 0}

	for _ in range(1000):
		result = stickwork.sequence_utils.weighted_choice([("heavy", 0.9), ("light", 0.1)], rng)
		counts[result] += 1

	assert counts["heavy"] > 800


def test_weighted_choice_invalid_options () -> None:

	"""Empty options or zero total weight raise ValueError."""

	with pytest.raises(ValueError):
		stickwork.sequence_utils.weighted_choice([], random.Random(0))

	with pytest.raises(ValueError):
		stickwork.sequence_utils.weighted_choice([("a", 0.0)], random.Random(0))


class _LowRandom (random.Random):

	"""Always draws the bottom of the range."""

	def random (self) -> float:
		return 0.0


def test_weighted_choice_skips_zero_weight () -> None:

	"""A zero-weight option is never picked, even on the lowest draw."""

	options = [("never", 0.0), ("always", 1.0)]

	assert stickwork.sequence_utils.weighted_choice(options, _LowRandom()) == "always"
	assert stickwork.sequence_utils.weighted_choice(options, random.Random(5)) == "always"


def test_weighted_choice_deterministic () -> None:

	"""Same seed should produce the same result."""

	options = [(8, 0.3), (12, 0.2), (16, 0.5)]

	result_1 = stickwork.sequence_utils.weighted_choice(options, random.Random(99))
	result_2 = stickwork.sequence_utils.weighted_choice(options, random.Random(99))

	assert result_1 == result_2
