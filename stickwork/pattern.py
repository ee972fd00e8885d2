import dataclasses
import fractions
import logging
import random
import typing

import stickwork.accents
import stickwork.config
import stickwork.constants.instruments
import stickwork.constants.limbs
import stickwork.constants.subdivisions
import stickwork.sequence_utils
import stickwork.sticking
import stickwork.subdivision
import stickwork.tokens


logger = logging.getLogger(__name__)

Cells = typing.Tuple[typing.Tuple[str, ...], ...]


@dataclasses.dataclass(frozen=True)
class NoteSlot:

	"""
	Everything the notation layer needs to draw one note slot.

	``voicing_keys`` holds instrument codes, including pedal voices added by
	the foot options. ``is_rest`` describes the voicing token only, so a rest
	slot can still carry a pedal hit. Grace limbs of a flam/drag/ruff are in
	``grace_limbs``; they do not take a slot of their own.
	"""

	index: int
	voicing_keys: typing.Tuple[str, ...]
	sticking_glyph: typing.Optional[str]
	grace_limbs: typing.Tuple[str, ...]
	is_accented: bool
	is_ghost: bool
	is_rest: bool
	duration_hint: str
	beat_index: int
	position: fractions.Fraction


@dataclasses.dataclass
class ValidationResult:

	"""
	Outcome of ``validate_pattern``: every problem found, not just the first.
	"""

	valid: bool
	errors: typing.List[str] = dataclasses.field(default_factory=list)


def _fit (tokens: typing.Sequence[str], length: int) -> typing.Tuple[str, ...]:

	"""
	Truncate a token stream to ``length``, or tile it when its cell does not
	divide ``length`` evenly. A cell that divides the bar is kept short.
	"""

	if not tokens or length <= 0:
		return tuple(tokens)

	if len(tokens) > length:
		return tuple(tokens[:length])

	if length % len(tokens):
		return tuple(stickwork.sequence_utils.tile(tokens, length))

	return tuple(tokens)


@dataclasses.dataclass(frozen=True)
class Pattern:

	"""
	One bar of a drum pattern, repeated ``repeat`` times.

	Patterns are immutable: every edit returns a new pattern. Structural edits
	(time signature, subdivision, per-beat subdivisions) settle the result so
	that both token streams expand to exactly ``notes_per_bar`` tokens and
	every accent lies inside the bar.

	In standard mode ``voicing`` and ``sticking`` are cells tiled across the
	bar. In advanced mode ``per_beat_subdivisions`` gives each beat its own
	grid and ``per_beat_voicing``/``per_beat_sticking`` hold one cell per beat,
	each tiled across that beat's notes.

	Example:
		```python
		pattern = Pattern.from_text("4/4", 16, voicing="S S K S", sticking="R L K R", accents=[0, 8])
		pattern = pattern.with_subdivision(8)    # accent 8 is dropped
		slots = note_slots(pattern)
		```
	"""

	time_signature: stickwork.subdivision.TimeSignature = stickwork.subdivision.TimeSignature()
	subdivision: int = stickwork.constants.subdivisions.DEFAULT_SUBDIVISION
	voicing: typing.Tuple[str, ...] = (stickwork.constants.instruments.SNARE,)
	sticking: typing.Tuple[str, ...] = (stickwork.constants.limbs.RIGHT, stickwork.constants.limbs.LEFT)
	accents: typing.FrozenSet[int] = frozenset()
	left_foot: bool = False
	right_foot: bool = False
	repeat: int = 1
	per_beat_subdivisions: typing.Optional[typing.Tuple[int, ...]] = None
	per_beat_voicing: typing.Optional[Cells] = None
	per_beat_sticking: typing.Optional[Cells] = None

	@classmethod
	def from_text (
		cls,
		time_signature: str = "4/4",
		subdivision: int = stickwork.constants.subdivisions.DEFAULT_SUBDIVISION,
		voicing: str = "S",
		sticking: str = "R L",
		accents: typing.Iterable[int] = (),
		practice_pad_mode: bool = False,
		rng: typing.Optional[random.Random] = None,
		**kwargs: typing.Any
	) -> "Pattern":

		"""
		Build a settled pattern from the textual field values.

		The sticking is synchronized to the voicing as if the voicing had just
		been typed: a short sticking cell is kept when it already fits, and is
		rewritten at full bar length when any slot needed a repair.
		"""

		pattern = cls(
			time_signature = stickwork.subdivision.parse_time_signature(time_signature, strict=True),
			subdivision = subdivision,
			voicing = tuple(stickwork.tokens.parse_tokens(voicing)),
			sticking = tuple(stickwork.tokens.parse_tokens(sticking)),
			accents = frozenset(accents),
			**kwargs
		).settle(practice_pad_mode, rng)

		if pattern.advanced:
			return pattern

		return pattern.with_voicing(pattern.voicing, practice_pad_mode, rng)

	# ── Derived values ───────────────────────────────────────────────

	@property
	def advanced (self) -> bool:
		return self.per_beat_subdivisions is not None

	@property
	def beat_note_counts (self) -> typing.List[int]:

		"""Note slots in each beat."""

		subdivisions = self.per_beat_subdivisions

		if subdivisions is None:
			subdivisions = (self.subdivision,) * self.time_signature.beats_per_bar

		_, counts = stickwork.subdivision.notes_per_bar_advanced(self.time_signature, subdivisions)

		return counts

	@property
	def notes_per_bar (self) -> int:

		if self.per_beat_subdivisions is not None:
			total, _ = stickwork.subdivision.notes_per_bar_advanced(self.time_signature, self.per_beat_subdivisions)
			return total

		return stickwork.subdivision.notes_per_bar(self.time_signature, self.subdivision)

	@property
	def positions (self) -> typing.List[fractions.Fraction]:

		"""Beat position of every note slot."""

		if self.per_beat_subdivisions is not None:
			return stickwork.subdivision.note_positions_advanced(self.time_signature, self.per_beat_subdivisions)

		return stickwork.subdivision.note_positions(self.time_signature, self.subdivision)

	@property
	def is_triplet (self) -> bool:

		if self.per_beat_subdivisions is not None:
			return any(stickwork.subdivision.is_triplet(s) for s in self.per_beat_subdivisions)

		return stickwork.subdivision.is_triplet(self.subdivision)

	# ── Settling ─────────────────────────────────────────────────────

	def settle (self, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Reassert the length invariants after a structural edit.

		Token streams longer than the bar are truncated, streams whose cell
		does not divide the bar are tiled to full length, and accents outside
		the bar are dropped. In advanced mode each beat is fitted separately;
		beats without a cell get a snare cell with a generated sticking. In
		practice pad mode every kick limb becomes a hand.
		"""

		total = self.notes_per_bar
		accents = stickwork.accents.filter_accents(self.accents, total)

		if self.per_beat_subdivisions is None:

			voicing = _fit(self.voicing or (stickwork.constants.instruments.DEFAULT_INSTRUMENT,), total)
			sticking = self.sticking or tuple(stickwork.sticking.sync_sticking_from_voicing(voicing, (), practice_pad_mode, rng))

			if practice_pad_mode:
				sticking = tuple(stickwork.sticking.strip_kick_from_sticking(sticking, rng))

			return dataclasses.replace(
				self,
				voicing = voicing,
				sticking = _fit(sticking, total),
				accents = accents,
				per_beat_voicing = None,
				per_beat_sticking = None,
			)

		voicing_cells: typing.List[typing.Tuple[str, ...]] = []
		sticking_cells: typing.List[typing.Tuple[str, ...]] = []

		for beat, count in enumerate(self.beat_note_counts):

			voicing_cell = self._cell(self.per_beat_voicing, beat) or (stickwork.constants.instruments.DEFAULT_INSTRUMENT,)
			sticking_cell = self._cell(self.per_beat_sticking, beat)

			if not sticking_cell:
				logger.debug(f"Generating sticking for beat {beat} with no sticking cell")
				sticking_cell = tuple(stickwork.sticking.sync_sticking_from_voicing(voicing_cell, (), practice_pad_mode, rng, length=count))

			if practice_pad_mode:
				sticking_cell = tuple(stickwork.sticking.strip_kick_from_sticking(sticking_cell, rng))

			voicing_cells.append(_fit(voicing_cell, count))
			sticking_cells.append(_fit(sticking_cell, count))

		return dataclasses.replace(
			self,
			accents = accents,
			per_beat_voicing = tuple(voicing_cells),
			per_beat_sticking = tuple(sticking_cells),
		)

	@staticmethod
	def _cell (cells: typing.Optional[Cells], beat: int) -> typing.Tuple[str, ...]:

		if cells is None or beat >= len(cells):
			return ()

		return tuple(cells[beat])

	# ── Structural edits ─────────────────────────────────────────────

	def with_time_signature (self, value: stickwork.subdivision.TimeSignatureLike, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Change the time signature.

		Text is parsed strictly: malformed text raises
		``TimeSignatureError`` and the caller keeps this pattern unchanged.
		Per-beat subdivisions are left as they are, even if they now cover a
		different number of beats.
		"""

		signature = stickwork.subdivision.parse_time_signature(value, strict=True)

		return dataclasses.replace(self, time_signature=signature).settle(practice_pad_mode, rng)

	def with_subdivision (self, subdivision: int, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		return dataclasses.replace(self, subdivision=subdivision).settle(practice_pad_mode, rng)

	def with_per_beat_subdivisions (self, subdivisions: typing.Sequence[int], practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Set the per-beat grid; the list may cover fewer or more beats than the bar.
		"""

		return dataclasses.replace(self, per_beat_subdivisions=tuple(subdivisions)).settle(practice_pad_mode, rng)

	def enable_advanced_mode (self, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Switch to per-beat subdivisions, starting every beat on the current grid.

		The expanded voicing and sticking are split into one cell per beat.
		"""

		if self.advanced:
			return self

		voicing = expand_voicing(self)
		sticking = expand_sticking(self)
		voicing_cells: typing.List[typing.Tuple[str, ...]] = []
		sticking_cells: typing.List[typing.Tuple[str, ...]] = []
		start = 0

		for count in self.beat_note_counts:
			voicing_cells.append(tuple(voicing[start:start + count]))
			sticking_cells.append(tuple(sticking[start:start + count]))
			start += count

		advanced = dataclasses.replace(
			self,
			per_beat_subdivisions = (self.subdivision,) * self.time_signature.beats_per_bar,
			per_beat_voicing = tuple(voicing_cells),
			per_beat_sticking = tuple(sticking_cells),
		)

		return advanced.settle(practice_pad_mode, rng)

	def disable_advanced_mode (self, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Return to a single subdivision, keeping the expanded token streams.
		"""

		if not self.advanced:
			return self

		standard = dataclasses.replace(
			self,
			voicing = tuple(expand_voicing(self)),
			sticking = tuple(expand_sticking(self)),
			per_beat_subdivisions = None,
		)

		return standard.settle(practice_pad_mode, rng)

	# ── Field edits ──────────────────────────────────────────────────

	def with_voicing (self, voicing: stickwork.sticking.TokenInput, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Replace the standard-mode voicing and resynchronize the sticking.

		The sticking keeps its short cell when the voicing edit needed no
		repairs; otherwise it is rewritten at full bar length.
		"""

		tokens = stickwork.tokens.parse_tokens(voicing)

		if practice_pad_mode:
			tokens = stickwork.sticking.enforce_practice_pad_voicing(tokens)

		total = self.notes_per_bar
		old_sticking = stickwork.sequence_utils.tile(self.sticking, total)
		sticking = stickwork.sticking.sync_sticking_from_voicing(tokens, old_sticking, practice_pad_mode, rng, length=total)

		updated = dataclasses.replace(
			self,
			voicing = tuple(tokens),
			sticking = self.sticking if sticking == old_sticking else tuple(sticking),
		)

		return updated.settle(practice_pad_mode, rng)

	def with_sticking (self, sticking: stickwork.sticking.TokenInput, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Replace the standard-mode sticking and resynchronize the voicing.

		In practice pad mode any kick limb is replaced by a random hand first.
		"""

		tokens = stickwork.tokens.parse_tokens(sticking)

		if practice_pad_mode:
			tokens = stickwork.sticking.strip_kick_from_sticking(tokens, rng)

		total = self.notes_per_bar
		old_voicing = stickwork.sequence_utils.tile(self.voicing, total)
		voicing = stickwork.sticking.sync_voicing_from_sticking(tokens, old_voicing, practice_pad_mode, length=total)

		updated = dataclasses.replace(
			self,
			voicing = self.voicing if voicing == old_voicing else tuple(voicing),
			sticking = tuple(tokens),
		)

		return updated.settle(practice_pad_mode, rng)

	def with_per_beat_voicing (self, beat: int, voicing: stickwork.sticking.TokenInput, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Replace one beat's voicing cell in advanced mode and resynchronize
		that beat's sticking.
		"""

		if not self.advanced:
			raise ValueError("Per-beat voicing requires advanced mode")

		counts = self.beat_note_counts

		if not 0 <= beat < len(counts):
			raise ValueError(f"Beat {beat} is outside the {len(counts)} beat(s) of this pattern")

		tokens = stickwork.tokens.parse_tokens(voicing)

		if practice_pad_mode:
			tokens = stickwork.sticking.enforce_practice_pad_voicing(tokens)

		old_sticking = self._cell(self.per_beat_sticking, beat)
		sticking = stickwork.sticking.sync_sticking_from_voicing(tokens, old_sticking, practice_pad_mode, rng, length=counts[beat])

		voicing_cells = [self._cell(self.per_beat_voicing, b) for b in range(len(counts))]
		sticking_cells = [self._cell(self.per_beat_sticking, b) for b in range(len(counts))]
		voicing_cells[beat] = tuple(tokens)
		sticking_cells[beat] = tuple(sticking)

		updated = dataclasses.replace(self, per_beat_voicing=tuple(voicing_cells), per_beat_sticking=tuple(sticking_cells))

		return updated.settle(practice_pad_mode, rng)

	def with_per_beat_sticking (self, beat: int, sticking: stickwork.sticking.TokenInput, practice_pad_mode: bool = False, rng: typing.Optional[random.Random] = None) -> "Pattern":

		"""
		Replace one beat's sticking cell in advanced mode and resynchronize
		that beat's voicing.
		"""

		if not self.advanced:
			raise ValueError("Per-beat sticking requires advanced mode")

		counts = self.beat_note_counts

		if not 0 <= beat < len(counts):
			raise ValueError(f"Beat {beat} is outside the {len(counts)} beat(s) of this pattern")

		tokens = stickwork.tokens.parse_tokens(sticking)

		if practice_pad_mode:
			tokens = stickwork.sticking.strip_kick_from_sticking(tokens, rng)

		old_voicing = self._cell(self.per_beat_voicing, beat)
		voicing = stickwork.sticking.sync_voicing_from_sticking(tokens, old_voicing, practice_pad_mode, length=counts[beat])

		voicing_cells = [self._cell(self.per_beat_voicing, b) for b in range(len(counts))]
		sticking_cells = [self._cell(self.per_beat_sticking, b) for b in range(len(counts))]
		voicing_cells[beat] = tuple(voicing)
		sticking_cells[beat] = tuple(tokens)

		updated = dataclasses.replace(self, per_beat_voicing=tuple(voicing_cells), per_beat_sticking=tuple(sticking_cells))

		return updated.settle(practice_pad_mode, rng)

	def with_accents (self, accents: typing.Iterable[int]) -> "Pattern":

		return dataclasses.replace(self, accents=stickwork.accents.filter_accents(accents, self.notes_per_bar))

	def toggle_accent (self, index: int) -> "Pattern":

		return self.with_accents(self.accents ^ {index})

	def with_feet (self, left_foot: typing.Optional[bool] = None, right_foot: typing.Optional[bool] = None) -> "Pattern":

		return dataclasses.replace(
			self,
			left_foot = self.left_foot if left_foot is None else left_foot,
			right_foot = self.right_foot if right_foot is None else right_foot,
		)

	def with_repeat (self, repeat: int) -> "Pattern":

		if repeat < 1:
			raise ValueError("repeat must be at least 1")

		return dataclasses.replace(self, repeat=repeat)


def default_pattern (config: typing.Optional[stickwork.config.EngineConfig] = None, rng: typing.Optional[random.Random] = None) -> Pattern:

	"""
	A new pattern: single snare voicing and alternating sticking on the
	configured grid (4/4 sixteenths unless configured otherwise).

	With ``practice_pad_mode`` configured, a kick limb in the default sticking
	becomes a hand.
	"""

	config = config or stickwork.config.EngineConfig()

	return Pattern.from_text(
		time_signature = config.default_time_signature,
		subdivision = config.default_subdivision,
		voicing = stickwork.constants.instruments.SNARE,
		sticking = config.default_sticking,
		practice_pad_mode = config.practice_pad_mode,
		rng = rng,
	)


def _expand (pattern: Pattern, flat: typing.Sequence[str], cells: typing.Optional[Cells]) -> typing.List[str]:

	if pattern.per_beat_subdivisions is None:
		return stickwork.sequence_utils.tile(flat, pattern.notes_per_bar)

	expanded: typing.List[str] = []

	for beat, count in enumerate(pattern.beat_note_counts):
		cell = Pattern._cell(cells, beat) or tuple(flat)
		expanded.extend(stickwork.sequence_utils.tile(cell, count))

	return expanded


def expand_voicing (pattern: Pattern) -> typing.List[str]:

	"""The voicing token of every note slot in the bar."""

	return _expand(pattern, pattern.voicing, pattern.per_beat_voicing)


def expand_sticking (pattern: Pattern) -> typing.List[str]:

	"""The sticking token of every note slot in the bar."""

	return _expand(pattern, pattern.sticking, pattern.per_beat_sticking)


def note_slots (pattern: Pattern, practice_pad_mode: bool = False, sticking_offset: int = 0) -> typing.List[NoteSlot]:

	"""
	Describe every note slot of one bar for the notation layer.

	Parameters:
		pattern: The pattern to describe
		practice_pad_mode: Show every struck slot as snare, played by a hand
			(a stored kick limb reads as the right hand)
		sticking_offset: Index of this bar's first note in a sticking that
			continues across bars

	Pedal voices are added on the first note of each beat: pedal hi-hat for
	``left_foot`` and kick for ``right_foot`` (unless the kick already sounds).
	"""

	voicing = expand_voicing(pattern)
	sticking = stickwork.tokens.parse_tokens(pattern.sticking) if pattern.per_beat_subdivisions is None else expand_sticking(pattern)
	positions = pattern.positions

	slots: typing.List[NoteSlot] = []

	for i, token in enumerate(voicing):

		parsed = stickwork.tokens.parse_voicing_token(token)
		is_rest = isinstance(parsed, stickwork.tokens.Rest)
		keys = stickwork.tokens.voicing_codes(parsed)

		if practice_pad_mode and keys:
			keys = [stickwork.constants.instruments.SNARE]

		position = positions[i]
		beat = int(position)

		if position.denominator == 1:
			if pattern.left_foot:
				keys.append(stickwork.constants.instruments.HI_HAT_FOOT)
			if pattern.right_foot and stickwork.constants.instruments.KICK not in keys:
				keys.append(stickwork.constants.instruments.KICK)

		if pattern.per_beat_subdivisions is not None and beat < len(pattern.per_beat_subdivisions):
			duration = stickwork.subdivision.duration_for_subdivision(pattern.per_beat_subdivisions[beat])
		else:
			duration = stickwork.subdivision.duration_for_subdivision(pattern.subdivision)

		glyph: typing.Optional[str] = None
		graces: typing.Tuple[str, ...] = ()

		if sticking and not is_rest:
			sticking_token = sticking[(sticking_offset + i) % len(sticking)]
			parsed_sticking = stickwork.tokens.parse_sticking_token(sticking_token)
			if isinstance(parsed_sticking, stickwork.tokens.Ornament):
				glyph = parsed_sticking.main_limb
				graces = parsed_sticking.grace_limbs
			elif isinstance(parsed_sticking, stickwork.tokens.Limb):
				glyph = parsed_sticking.code

			if practice_pad_mode and glyph == stickwork.constants.limbs.KICK:
				glyph = stickwork.constants.limbs.RIGHT

		slots.append(NoteSlot(
			index = i,
			voicing_keys = tuple(keys),
			sticking_glyph = glyph,
			grace_limbs = graces,
			is_accented = i in pattern.accents,
			is_ghost = stickwork.tokens.is_ghost(parsed),
			is_rest = is_rest,
			duration_hint = duration,
			beat_index = beat,
			position = position,
		))

	return slots


def _is_power_of_two (n: int) -> bool:
	return n > 0 and (n & (n - 1)) == 0


def validate_pattern (pattern: Pattern) -> ValidationResult:

	"""
	Check a pattern before it is handed to storage or export.

	Collects every problem rather than stopping at the first.
	"""

	errors: typing.List[str] = []
	signature = pattern.time_signature

	if not 1 <= signature.beats_per_bar <= 32:
		errors.append("Time signature numerator must be between 1 and 32")

	if not 1 <= signature.beat_unit <= 32 or not _is_power_of_two(signature.beat_unit):
		errors.append("Time signature denominator must be a power of 2 (1, 2, 4, 8, 16, 32)")

	valid_subdivisions = stickwork.constants.subdivisions.VALID_SUBDIVISIONS

	if pattern.per_beat_subdivisions is None:
		if pattern.subdivision not in valid_subdivisions:
			errors.append(f"Subdivision {pattern.subdivision} is unusual (common values: {', '.join(str(s) for s in valid_subdivisions)})")
	else:
		unusual = [s for s in pattern.per_beat_subdivisions if s not in valid_subdivisions]
		if unusual:
			errors.append(f"Per-beat subdivisions {unusual} are unusual (common values: {', '.join(str(s) for s in valid_subdivisions)})")
		if len(pattern.per_beat_subdivisions) != signature.beats_per_bar:
			errors.append(f"Per-beat subdivisions cover {len(pattern.per_beat_subdivisions)} of {signature.beats_per_bar} beats")

	if pattern.notes_per_bar < 1:
		errors.append(f"Subdivision {pattern.subdivision} gives no notes in {signature}")

	if not expand_voicing(pattern):
		errors.append("Voicing pattern is required")

	for token in expand_voicing(pattern):
		if stickwork.tokens.unknown_voicing_codes(token):
			errors.append(f"Invalid voicing token: {token!r} (valid: S, K, H, F, I, M, -, a compound like S+K, or a ghost like (S))")
			break

	for token in expand_sticking(pattern):
		limb = stickwork.tokens.main_limb(token)
		if limb is not None and limb not in stickwork.constants.limbs.MAIN_LIMBS:
			errors.append(f"Invalid sticking token: {token!r} (valid: R, L, K, -, or an ornament like lR)")
			break

	if pattern.repeat < 1:
		errors.append("Repeat must be a positive number")

	outside = sorted(a for a in pattern.accents if not 0 <= a < pattern.notes_per_bar)
	if outside:
		errors.append(f"Accents {outside} fall outside the {pattern.notes_per_bar}-note bar")

	return ValidationResult(valid=not errors, errors=errors)


def calculate_pattern_complexity (pattern: Pattern) -> str:

	"""
	Rough difficulty rating: ``easy``, ``medium`` or ``hard``.

	Scores more notes, finer grids, more accent groups and non-4 beat counts.
	"""

	total = pattern.notes_per_bar
	subdivision = max(pattern.per_beat_subdivisions) if pattern.per_beat_subdivisions else pattern.subdivision
	grouping = stickwork.accents.derive_grouping_from_accents(pattern.accents, total)
	groups = len([g for g in grouping if g > 0])

	score = total * 0.5 + subdivision * 0.3 + groups * 2

	if pattern.time_signature.beats_per_bar != 4:
		score += 5

	if score < 20:
		return "easy"

	if score < 40:
		return "medium"

	return "hard"
