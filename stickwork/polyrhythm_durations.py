"""
Notated durations for the two rhythms of a polyrhythm.

Each rhythm gets the largest standard note value that fits inside its share
of the bar. When that share is not itself a standard value, the rhythm is
written as a tuplet: its notes played in the time of the other rhythm's count.
"""

import dataclasses
import fractions
import typing

import stickwork.constants.durations


@dataclasses.dataclass(frozen=True)
class TupletConfig:

	"""Fit ``notes_per_group`` notes in the time of ``notes_occupied``."""

	notes_per_group: int
	notes_occupied: int


@dataclasses.dataclass
class PolyrhythmDurations:

	"""
	Duration codes, tuplet flags and tuplet configurations for both rhythms.
	"""

	right_duration: str
	left_duration: str
	right_needs_tuplet: bool
	left_needs_tuplet: bool
	right_tuplet: typing.Optional[TupletConfig]
	left_tuplet: typing.Optional[TupletConfig]
	right_note_beats: fractions.Fraction
	left_note_beats: fractions.Fraction

	@property
	def tuplet_config (self) -> typing.Optional[TupletConfig]:

		"""
		The tuplet when exactly one rhythm needs one, else None.

		When both rhythms need tuplets, the renderer decides how to write them
		from ``right_tuplet`` and ``left_tuplet``.
		"""

		if self.right_needs_tuplet and not self.left_needs_tuplet:
			return self.right_tuplet

		if self.left_needs_tuplet and not self.right_needs_tuplet:
			return self.left_tuplet

		return None

	@property
	def both_need_tuplets (self) -> bool:
		return self.right_needs_tuplet and self.left_needs_tuplet


def _ladder (beat_unit: int) -> typing.List[typing.Tuple[str, fractions.Fraction]]:

	if beat_unit == 8:
		return stickwork.constants.durations.COMPOUND_LADDER

	return stickwork.constants.durations.SIMPLE_LADDER


def duration_for_beats (beats: fractions.Fraction, beat_unit: int = 4) -> str:

	"""
	Largest standard duration not longer than ``beats``.

	Anything shorter than a sixteenth is written as a 32nd.
	"""

	ladder = _ladder(beat_unit)

	for code, length in ladder:
		if length <= beats:
			return code

	return ladder[-1][0]


def is_standard_duration (beats: fractions.Fraction, beat_unit: int = 4) -> bool:

	return any(length == beats for _, length in _ladder(beat_unit))


def calculate_durations (numerator: int, denominator: int, beats_per_bar: int, beat_unit: int = 4) -> PolyrhythmDurations:

	"""
	Decide note values and tuplets so N and M notes each fill the bar.

	Example:
		```python
		d = calculate_durations(4, 3, 4, 4)
		d.right_duration   # "q"
		d.left_duration    # "q", as a tuplet
		d.tuplet_config    # TupletConfig(notes_per_group=3, notes_occupied=4)
		```
	"""

	if numerator <= 0 or denominator <= 0:
		raise ValueError(f"Polyrhythm ratio terms must be positive, got {numerator}:{denominator}")

	if beats_per_bar <= 0:
		raise ValueError(f"beats_per_bar must be positive, got {beats_per_bar}")

	right_beats = fractions.Fraction(beats_per_bar, numerator)
	left_beats = fractions.Fraction(beats_per_bar, denominator)

	right_needs_tuplet = not is_standard_duration(right_beats, beat_unit)
	left_needs_tuplet = not is_standard_duration(left_beats, beat_unit)

	return PolyrhythmDurations(
		right_duration = duration_for_beats(right_beats, beat_unit),
		left_duration = duration_for_beats(left_beats, beat_unit),
		right_needs_tuplet = right_needs_tuplet,
		left_needs_tuplet = left_needs_tuplet,
		right_tuplet = TupletConfig(numerator, denominator) if right_needs_tuplet else None,
		left_tuplet = TupletConfig(denominator, numerator) if left_needs_tuplet else None,
		right_note_beats = right_beats,
		left_note_beats = left_beats,
	)
