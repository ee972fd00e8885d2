"""
Where the notes of a polyrhythm fall.

Both rhythms of an N:M polyrhythm are spaced evenly across the whole bar,
whatever the beat count. Positions are exact fractions of a beat, so true
coincidences are exact equalities; the alignment tolerance only guards
comparisons against callers that mix in floats.
"""

import dataclasses
import fractions
import math
import typing


# Positions closer than this (in beats) are treated as coinciding.
ALIGNMENT_TOLERANCE = 1e-4


@dataclasses.dataclass(frozen=True)
class Alignment:

	"""A right-rhythm note and a left-rhythm note that sound together."""

	right_index: int
	left_index: int


@dataclasses.dataclass
class PolyrhythmPositions:

	"""
	Beat positions of both rhythms and the notes that coincide.
	"""

	right_positions: typing.List[fractions.Fraction]
	left_positions: typing.List[fractions.Fraction]
	alignments: typing.List[Alignment]


def _even_positions (count: int, beats_per_bar: int) -> typing.List[fractions.Fraction]:

	return [fractions.Fraction(beats_per_bar * i, count) for i in range(count)]


def calculate_positions (numerator: int, denominator: int, beats_per_bar: int, tolerance: float = ALIGNMENT_TOLERANCE) -> PolyrhythmPositions:

	"""
	Compute the positions of an N:M polyrhythm and where they align.

	The right rhythm has ``numerator`` notes and the left rhythm
	``denominator`` notes. Each left note aligns with at most one right note;
	right notes are scanned in order and the first match wins.

	Parameters:
		numerator: Notes in the right rhythm
		denominator: Notes in the left rhythm
		beats_per_bar: Beats in the shared measure
		tolerance: Largest gap in beats still counted as coinciding

	Example:
		```python
		result = calculate_positions(4, 3, 4)
		# right_positions [0, 1, 2, 3], left_positions [0, 4/3, 8/3]
		# alignments [Alignment(0, 0)]
		```
	"""

	if numerator <= 0 or denominator <= 0:
		raise ValueError(f"Polyrhythm ratio terms must be positive, got {numerator}:{denominator}")

	if beats_per_bar <= 0:
		raise ValueError(f"beats_per_bar must be positive, got {beats_per_bar}")

	right = _even_positions(numerator, beats_per_bar)
	left = _even_positions(denominator, beats_per_bar)

	alignments: typing.List[Alignment] = []
	claimed: typing.Set[int] = set()

	for i, right_position in enumerate(right):
		for j, left_position in enumerate(left):
			if j in claimed:
				continue
			if abs(right_position - left_position) < tolerance:
				alignments.append(Alignment(i, j))
				claimed.add(j)

	return PolyrhythmPositions(right, left, alignments)


def lcm (a: int, b: int) -> int:

	"""Least common multiple of two positive integers."""

	return abs(a * b) // math.gcd(a, b)


def cycle_length (numerator: int, denominator: int) -> int:

	"""
	Number of grid slots needed to place both rhythms exactly (lcm of the terms).
	"""

	return lcm(numerator, denominator)
