"""
Polyrhythm patterns.

A polyrhythm plays N evenly spaced notes on one limb against M evenly spaced
notes on another, both filling the same bar. The pattern stores only the
ratio, the two limbs and voices, and per-rhythm accents; positions,
coincidences and notated durations are derived on demand.
"""

import dataclasses
import fractions
import logging
import typing

import stickwork.config
import stickwork.constants.instruments
import stickwork.constants.limbs
import stickwork.constants.polyrhythms
import stickwork.polyrhythm_durations
import stickwork.polyrhythm_positions
import stickwork.subdivision


logger = logging.getLogger(__name__)

RIGHT = "right"
LEFT = "left"


@dataclasses.dataclass(frozen=True)
class Rhythm:

	"""
	One side of a polyrhythm.

	``limb`` is a limb name (``right-hand``, ``left-foot``, ...), ``voice`` an
	instrument code and ``accents`` indices into this rhythm's own notes.
	"""

	limb: str
	voice: str
	accents: typing.FrozenSet[int] = frozenset()

	@property
	def sticking (self) -> str:

		"""The sticking code the limb is notated with."""

		return stickwork.constants.limbs.LIMB_NAMES[self.limb]


@dataclasses.dataclass(frozen=True)
class RhythmEvent:

	"""A single note of one rhythm, ready for notation or playback."""

	index: int
	position: fractions.Fraction
	duration: str
	voice: str
	sticking: str
	is_accented: bool
	is_aligned: bool


@dataclasses.dataclass(frozen=True)
class PolyrhythmPattern:

	"""
	An N:M polyrhythm over one bar.

	The right rhythm has ``numerator`` notes and the left rhythm
	``denominator`` notes.
	"""

	numerator: int
	denominator: int
	right_rhythm: Rhythm
	left_rhythm: Rhythm
	time_signature: stickwork.subdivision.TimeSignature = stickwork.subdivision.TimeSignature()
	repeat: int = 1
	name: typing.Optional[str] = None
	description: typing.Optional[str] = None

	@property
	def ratio_text (self) -> str:
		return f"{self.numerator}:{self.denominator}"

	@property
	def cycle_length (self) -> int:
		return stickwork.polyrhythm_positions.cycle_length(self.numerator, self.denominator)

	def positions (self, tolerance: float = stickwork.polyrhythm_positions.ALIGNMENT_TOLERANCE) -> stickwork.polyrhythm_positions.PolyrhythmPositions:

		return stickwork.polyrhythm_positions.calculate_positions(
			self.numerator,
			self.denominator,
			self.time_signature.beats_per_bar,
			tolerance,
		)

	@property
	def durations (self) -> stickwork.polyrhythm_durations.PolyrhythmDurations:

		return stickwork.polyrhythm_durations.calculate_durations(
			self.numerator,
			self.denominator,
			self.time_signature.beats_per_bar,
			self.time_signature.beat_unit,
		)

	def rhythm (self, side: str) -> Rhythm:

		if side == RIGHT:
			return self.right_rhythm

		if side == LEFT:
			return self.left_rhythm

		raise ValueError(f"Unknown polyrhythm side {side!r} (expected {RIGHT!r} or {LEFT!r})")

	def toggle_accent (self, side: str, index: int) -> "PolyrhythmPattern":

		"""Flip the accent on one note of one rhythm; out-of-range indices are ignored."""

		rhythm = self.rhythm(side)
		count = self.numerator if side == RIGHT else self.denominator

		if not 0 <= index < count:
			logger.debug(f"Ignoring accent {index} outside the {count}-note {side} rhythm")
			return self

		updated = dataclasses.replace(rhythm, accents=rhythm.accents ^ {index})

		if side == RIGHT:
			return dataclasses.replace(self, right_rhythm=updated)

		return dataclasses.replace(self, left_rhythm=updated)


def _voice_code (voice: str) -> str:

	code = stickwork.constants.instruments.VOICE_CODES.get(voice.lower())

	if code is not None:
		return code

	if voice.upper() in stickwork.constants.instruments.INSTRUMENT_ALIASES:
		return stickwork.constants.instruments.INSTRUMENT_ALIASES[voice.upper()]

	raise ValueError(f"Unknown voice {voice!r}")


def generate_polyrhythm_pattern (
	numerator: int,
	denominator: int,
	right_limb: str = "right-hand",
	left_limb: str = "left-hand",
	right_voice: str = stickwork.constants.instruments.SNARE,
	left_voice: str = stickwork.constants.instruments.KICK,
	time_signature: stickwork.subdivision.TimeSignatureLike = "4/4",
	name: typing.Optional[str] = None,
	description: typing.Optional[str] = None
) -> PolyrhythmPattern:

	"""
	Build a polyrhythm pattern from a ratio.

	Voices may be given as codes (``S``) or names (``snare``).

	Example:
		```python
		poly = generate_polyrhythm_pattern(3, 2, time_signature="4/4")
		poly.name          # "3:2 Polyrhythm"
		poly.description   # "3 notes in right hand against 2 notes in left hand"
		```
	"""

	if numerator <= 0 or denominator <= 0:
		raise ValueError(f"Polyrhythm ratio terms must be positive, got {numerator}:{denominator}")

	for limb in (right_limb, left_limb):
		if limb not in stickwork.constants.limbs.LIMB_NAMES:
			raise ValueError(f"Unknown limb {limb!r} (expected one of {sorted(stickwork.constants.limbs.LIMB_NAMES)})")

	return PolyrhythmPattern(
		numerator = numerator,
		denominator = denominator,
		right_rhythm = Rhythm(right_limb, _voice_code(right_voice)),
		left_rhythm = Rhythm(left_limb, _voice_code(left_voice)),
		time_signature = stickwork.subdivision.parse_time_signature(time_signature),
		name = name or f"{numerator}:{denominator} Polyrhythm",
		description = description or (
			f"{numerator} notes in {right_limb.replace('-', ' ')} against "
			f"{denominator} notes in {left_limb.replace('-', ' ')}"
		),
	)


def common_polyrhythms () -> typing.List[PolyrhythmPattern]:

	"""One ready-made pattern for each common ratio."""

	return [
		generate_polyrhythm_pattern(
			entry["numerator"],
			entry["denominator"],
			name = entry["name"],
			description = entry["description"],
		)
		for entry in stickwork.constants.polyrhythms.COMMON_POLYRHYTHMS
	]


def rhythm_events (
	polyrhythm: PolyrhythmPattern,
	side: str,
	tolerance: typing.Optional[float] = None,
	config: typing.Optional[stickwork.config.EngineConfig] = None
) -> typing.List[RhythmEvent]:

	"""
	Every note of one rhythm with its position, duration, accent and whether
	it sounds together with a note of the other rhythm.

	The coincidence tolerance is ``tolerance`` when given, otherwise the
	configured ``alignment_tolerance``.
	"""

	if tolerance is None:
		tolerance = (config or stickwork.config.EngineConfig()).alignment_tolerance

	rhythm = polyrhythm.rhythm(side)
	positions = polyrhythm.positions(tolerance)
	durations = polyrhythm.durations

	if side == RIGHT:
		beats = positions.right_positions
		aligned = {a.right_index for a in positions.alignments}
		duration = durations.right_duration
	else:
		beats = positions.left_positions
		aligned = {a.left_index for a in positions.alignments}
		duration = durations.left_duration

	return [
		RhythmEvent(
			index = i,
			position = position,
			duration = duration,
			voice = rhythm.voice,
			sticking = rhythm.sticking,
			is_accented = i in rhythm.accents,
			is_aligned = i in aligned,
		)
		for i, position in enumerate(beats)
	]
