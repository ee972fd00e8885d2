"""Common rudiment sticking cells.

Each cell is short and meant to be tiled across a bar. Ornament tokens
(``lR``, ``rL``) are single note slots.
"""

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class StickingPattern:

	"""A named sticking cell."""

	name: str
	pattern: str
	description: str = ""


COMMON_STICKING_PATTERNS: typing.List[StickingPattern] = [
	StickingPattern("Single Stroke Roll", "R L", "Alternating hands"),
	StickingPattern("Double Stroke Roll", "R R L L", "Two strokes per hand"),
	StickingPattern("Paradiddle", "R L R R L R L L", "Classic paradiddle"),
	StickingPattern("Inverted Paradiddle", "R L L R L R R L", "Inverted paradiddle"),
	StickingPattern("Paradiddle-diddle", "R L R R L L", "Paradiddle with double"),
	StickingPattern("Flam", "lR rL", "Alternating flams"),
	StickingPattern("Swiss Army Triplet", "R L R", "Three-note pattern"),
	StickingPattern("Pataflafla", "R L R L", "Four-note pattern"),
	StickingPattern("Single Stroke Four", "R R R R L L L L", "Four strokes per hand"),
	StickingPattern("Double Paradiddle", "R L R L R R L R L R L L", "Extended paradiddle"),
	StickingPattern("Triple Paradiddle", "R L R L R L R R L R L R L R L L", "Long paradiddle variation"),
	StickingPattern("Flam Tap", "lR rL R L", "Flam tap pattern"),
	StickingPattern("Drag", "R R L", "Drag pattern"),
	StickingPattern("Single Drag Tap", "R R L R L L", "Drag tap combination"),
	StickingPattern("Double Drag Tap", "R R L R R L L L", "Double drag tap"),
	StickingPattern("Six Stroke Roll", "R R L L R L", "Six-note pattern"),
	StickingPattern("Seven Stroke Roll", "R R L L R L R", "Seven-note pattern"),
	StickingPattern("Nine Stroke Roll", "R R L L R R L L R", "Nine-note pattern"),
]


def get_sticking_pattern (name: str) -> typing.Optional[StickingPattern]:

	"""Look up a rudiment by its display name, or None if unknown."""

	for pattern in COMMON_STICKING_PATTERNS:
		if pattern.name == name:
			return pattern

	return None


def sticking_pattern_names () -> typing.List[str]:

	"""Return every rudiment name in display order."""

	return [pattern.name for pattern in COMMON_STICKING_PATTERNS]
