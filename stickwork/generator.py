"""
Random patterns for practice sessions.

Every function takes an optional ``random.Random``; pass a seeded instance to
get the same pattern back.
"""

import dataclasses
import logging
import random
import typing

import stickwork.config
import stickwork.constants.instruments
import stickwork.constants.subdivisions
import stickwork.pattern
import stickwork.sequence_utils
import stickwork.sticking
import stickwork.subdivision


logger = logging.getLogger(__name__)


RANDOM_TIME_SIGNATURES: typing.List[str] = ["2/4", "3/4", "4/4", "5/4", "6/8", "7/8", "12/8"]

# Sixteenths are the most common practice grid.
RANDOM_SUBDIVISIONS: typing.List[typing.Tuple[int, float]] = [
	(stickwork.constants.subdivisions.EIGHTH, 0.3),
	(stickwork.constants.subdivisions.EIGHTH_TRIPLET, 0.2),
	(stickwork.constants.subdivisions.SIXTEENTH, 0.5),
]

# Voicing cells tiled across the bar.
RANDOM_DRUM_PATTERNS: typing.List[typing.Tuple[str, ...]] = [
	("S",),
	("S", "S", "K", "S"),
	("K", "S", "S", "S"),
	("S", "K"),
	("S+H", "H", "K+H", "H"),
	("S", "(S)", "(S)", "S"),
	("S", "-", "K", "S"),
	("S", "S", "I", "M", "F", "K"),
	("H", "H", "S+H", "H"),
]


def randomize_accents (notes_per_bar: int, rng: typing.Optional[random.Random] = None) -> typing.FrozenSet[int]:

	"""
	Pick between zero and ``notes_per_bar`` distinct accent indices.

	Example:
		```python
		randomize_accents(16, random.Random(3))   # e.g. frozenset({0, 5, 11})
		```
	"""

	if notes_per_bar <= 0:
		return frozenset()

	rng = stickwork.sequence_utils.resolve_rng(rng)
	count = rng.randint(0, notes_per_bar)

	return frozenset(rng.sample(range(notes_per_bar), count))


def randomize_per_beat_subdivisions (time_signature: stickwork.subdivision.TimeSignatureLike, rng: typing.Optional[random.Random] = None) -> typing.List[int]:

	"""One random subdivision for every beat of the bar."""

	rng = stickwork.sequence_utils.resolve_rng(rng)
	signature = stickwork.subdivision.parse_time_signature(time_signature)

	return [stickwork.sequence_utils.weighted_choice(RANDOM_SUBDIVISIONS, rng) for _ in range(signature.beats_per_bar)]


def generate_random_pattern (
	practice_pad_mode: typing.Optional[bool] = None,
	advanced_mode: bool = False,
	rng: typing.Optional[random.Random] = None,
	config: typing.Optional[stickwork.config.EngineConfig] = None
) -> stickwork.pattern.Pattern:

	"""
	Generate a complete random pattern.

	The time signature, subdivision (or per-beat subdivisions), accents,
	voicing and repeat count (1-4 bars) are all random. The sticking is
	generated to fit the voicing: rests are rests, kicks take the kick limb and
	everything else gets a hand. In practice pad mode the voicing is all snare.

	Parameters:
		practice_pad_mode: Snare-only voicing, no kick limb (default: the
			config setting)
		advanced_mode: Give every beat its own random subdivision
		rng: Random source
		config: Engine settings; only ``practice_pad_mode`` is read

	Example:
		```python
		pattern = generate_random_pattern(rng=random.Random(42))
		```
	"""

	rng = stickwork.sequence_utils.resolve_rng(rng)

	if practice_pad_mode is None:
		practice_pad_mode = (config or stickwork.config.EngineConfig()).practice_pad_mode

	signature = stickwork.subdivision.parse_time_signature(rng.choice(RANDOM_TIME_SIGNATURES))
	subdivision = stickwork.sequence_utils.weighted_choice(RANDOM_SUBDIVISIONS, rng)
	per_beat = randomize_per_beat_subdivisions(signature, rng) if advanced_mode else None

	if practice_pad_mode:
		voicing_cell: typing.Sequence[str] = (stickwork.constants.instruments.SNARE,)
	else:
		voicing_cell = rng.choice(RANDOM_DRUM_PATTERNS)

	pattern = stickwork.pattern.Pattern(
		time_signature = signature,
		subdivision = subdivision,
		per_beat_subdivisions = tuple(per_beat) if per_beat is not None else None,
	)

	total = pattern.notes_per_bar
	voicing = stickwork.sequence_utils.tile(voicing_cell, total)

	if per_beat is None:
		sticking = stickwork.sticking.generate_sticking_for_voicing(voicing, total, practice_pad_mode, pattern.is_triplet, rng)
		pattern = stickwork.pattern.Pattern(
			time_signature = signature,
			subdivision = subdivision,
			voicing = tuple(voicing),
			sticking = tuple(sticking),
		)
	else:
		voicing_cells: typing.List[typing.Tuple[str, ...]] = []
		sticking_cells: typing.List[typing.Tuple[str, ...]] = []
		start = 0
		for beat_subdivision, count in zip(per_beat, pattern.beat_note_counts):
			beat_voicing = voicing[start:start + count]
			beat_sticking = stickwork.sticking.generate_sticking_for_voicing(
				beat_voicing, count, practice_pad_mode, stickwork.subdivision.is_triplet(beat_subdivision), rng
			)
			voicing_cells.append(tuple(beat_voicing))
			sticking_cells.append(tuple(beat_sticking))
			start += count
		pattern = dataclasses.replace(pattern, per_beat_voicing=tuple(voicing_cells), per_beat_sticking=tuple(sticking_cells))

	pattern = pattern.with_accents(randomize_accents(pattern.notes_per_bar, rng)).with_repeat(rng.randint(1, 4))

	logger.debug(f"Generated random {signature} pattern with {pattern.notes_per_bar} notes per bar")

	return pattern.settle(practice_pad_mode, rng)
