import dataclasses
import fractions
import math
import re
import typing

import stickwork.constants.durations
import stickwork.constants.subdivisions


TIME_SIGNATURE_PATTERN = re.compile(r"^(\d+)\s*/\s*(\d+)$")


class TimeSignatureError(ValueError):

	"""Raised by the strict time signature parser; the message is user-facing."""


@dataclasses.dataclass(frozen=True)
class TimeSignature:

	"""
	Beats per bar over the note value that gets one beat.
	"""

	beats_per_bar: int = 4
	beat_unit: int = 4

	def __str__ (self) -> str:
		return f"{self.beats_per_bar}/{self.beat_unit}"


TimeSignatureLike = typing.Union[TimeSignature, str]


def validate_time_signature (text: str) -> typing.Optional[str]:

	"""
	Check time signature text typed by a user.

	Returns the message to show, or None when the text is acceptable. The
	caller keeps its previous value while a message is returned.
	"""

	if not text or not text.strip():
		return "Time signature is required"

	if not TIME_SIGNATURE_PATTERN.match(text.strip()):
		return "Time signature must be in format X/Y (e.g., 4/4)"

	return None


def parse_time_signature (value: TimeSignatureLike, strict: bool = False) -> TimeSignature:

	"""
	Parse ``"N/D"`` into a ``TimeSignature``.

	In lenient mode malformed text falls back to 4/4 and zero terms are raised
	to 1. In strict mode malformed text raises ``TimeSignatureError``.
	"""

	if isinstance(value, TimeSignature):
		return value

	match = TIME_SIGNATURE_PATTERN.match((value or "").strip())

	if match is None:
		if strict:
			raise TimeSignatureError(validate_time_signature(value or ""))
		return TimeSignature()

	beats, unit = match.groups()

	return TimeSignature(max(1, int(beats)), max(1, int(unit)))


def is_triplet (subdivision: int) -> bool:

	return subdivision in stickwork.constants.subdivisions.TRIPLET_SUBDIVISIONS


def notes_per_beat (subdivision: int, beat_unit: int = 4) -> int:

	"""
	Note slots in one beat of the given subdivision.

	With a quarter-note beat this gives 3 for the eighth-triplet grid (12) and
	6 for the sextuplet grid (24); otherwise ``subdivision / 4``. A beat always
	holds at least one slot.
	"""

	return max(1, subdivision // beat_unit)


def notes_per_bar (time_signature: TimeSignatureLike, subdivision: int) -> int:

	"""
	Note slots in one bar: ``beats_per_bar * subdivision / beat_unit``, truncated.

	Example:
		```python
		notes_per_bar("4/4", 16)   # 16
		notes_per_bar("3/4", 12)   # 9
		notes_per_bar("6/8", 8)    # 6
		```
	"""

	signature = parse_time_signature(time_signature)

	return signature.beats_per_bar * subdivision // signature.beat_unit


def notes_per_bar_advanced (time_signature: TimeSignatureLike, per_beat_subdivisions: typing.Sequence[int]) -> typing.Tuple[int, typing.List[int]]:

	"""
	Total note slots and per-beat counts for a per-beat subdivision list.

	Only the supplied beats are counted, so a list still being built up one
	beat at a time always gets an answer.

	Each beat holds ``subdivision / beat_unit`` slots, which is fractional in
	compound meters. Beat boundaries round up and the bar total truncates, so a
	uniform list gives exactly the slots of the standard bar.

	Example:
		```python
		notes_per_bar_advanced("4/4", [16, 12, 8, 4])   # (10, [4, 3, 2, 1])
		notes_per_bar_advanced("6/8", [12] * 6)         # (9, [2, 1, 2, 1, 2, 1])
		```
	"""

	signature = parse_time_signature(time_signature)

	running = fractions.Fraction(0)
	boundaries: typing.List[int] = []

	for sub in per_beat_subdivisions:
		running += fractions.Fraction(sub, signature.beat_unit)
		boundaries.append(math.ceil(running))

	total = math.floor(running)
	counts: typing.List[int] = []
	previous = 0

	for boundary in boundaries:
		boundary = min(boundary, total)
		counts.append(boundary - previous)
		previous = boundary

	return total, counts


def note_positions_advanced (time_signature: TimeSignatureLike, per_beat_subdivisions: typing.Sequence[int]) -> typing.List[fractions.Fraction]:

	"""
	Position of every note slot in beats, for per-beat subdivisions.

	The third of four slots in beat 2 sits at ``2 + 2/4``.
	"""

	_, counts = notes_per_bar_advanced(time_signature, per_beat_subdivisions)
	positions: typing.List[fractions.Fraction] = []

	for beat, count in enumerate(counts):
		for i in range(count):
			positions.append(beat + fractions.Fraction(i, count))

	return positions


def note_positions (time_signature: TimeSignatureLike, subdivision: int) -> typing.List[fractions.Fraction]:

	"""
	Position of every note slot in beats for a uniform subdivision.
	"""

	signature = parse_time_signature(time_signature)
	total = notes_per_bar(signature, subdivision)

	return [fractions.Fraction(i * signature.beats_per_bar, total) for i in range(total)]


def beat_index_for_note (positions: typing.Sequence[fractions.Fraction], index: int) -> int:

	"""Map a flat note index back to the beat it falls in."""

	return int(positions[index])


def duration_for_subdivision (subdivision: int) -> str:

	"""Notated duration code for one slot of a subdivision grid."""

	return stickwork.constants.subdivisions.SUBDIVISION_DURATIONS.get(subdivision, stickwork.constants.durations.THIRTYSECOND)


def subdivision_text (subdivision: int) -> str:

	return stickwork.constants.subdivisions.SUBDIVISION_LABELS.get(subdivision, f"{subdivision}th")


def subdivision_description (subdivision: int) -> str:

	return stickwork.constants.subdivisions.SUBDIVISION_DESCRIPTIONS.get(subdivision, f"{subdivision}th notes")
