"""
Keeping voicing and sticking in step.

A pattern carries two token streams that users edit independently: the
voicing (which drums sound) and the sticking (which limb plays them). They
must agree on two things at every note slot - rests line up, and the kick limb
appears exactly where the voicing strikes the kick. Practice pad mode adds a
third rule: the kick limb never appears at all.

The synchronizers repair only the positions an edit has made invalid and leave
every other sticking choice alone, so a deliberate ``R R L L`` survives a
voicing change that does not touch rests or kicks. Where a repair needs a new
hand, the choice is random; pass a seeded ``random.Random`` to pin it.

Ornament tokens (``lR``, ``rrL``) are judged by their main limb. When the main
limb has to change, the grace notes are kept.
"""

import logging
import random
import typing

import stickwork.constants.instruments
import stickwork.constants.limbs
import stickwork.sequence_utils
import stickwork.tokens


logger = logging.getLogger(__name__)

TokenInput = typing.Union[str, typing.Sequence[str]]

_REST = "rest"
_KICK = "kick"
_HAND = "hand"


def _replace_main_limb (token: str, limb: str) -> str:

	"""Swap the main limb of a sticking token, keeping any grace notes."""

	ornament = stickwork.tokens.parse_ornament(token)

	if ornament is None:
		return limb

	return str(stickwork.tokens.Ornament(ornament.grace_limbs, limb))


def _with_kick (token: str) -> str:

	parsed = stickwork.tokens.parse_voicing_token(token)
	kick = stickwork.tokens.Instrument(stickwork.constants.instruments.KICK)

	if isinstance(parsed, stickwork.tokens.Rest):
		return stickwork.constants.instruments.KICK

	if isinstance(parsed, stickwork.tokens.Compound):
		return stickwork.tokens.format_voicing_token(stickwork.tokens.Compound(parsed.parts + (kick,)))

	return stickwork.tokens.format_voicing_token(stickwork.tokens.Compound((parsed, kick)))


def _strip_kick (parsed: stickwork.tokens.VoicingToken) -> typing.Optional[stickwork.tokens.VoicingToken]:

	if isinstance(parsed, stickwork.tokens.Instrument):
		return None if parsed.code == stickwork.constants.instruments.KICK else parsed

	if isinstance(parsed, stickwork.tokens.Ghost):
		inner = _strip_kick(parsed.inner)
		return None if inner is None else stickwork.tokens.Ghost(inner)

	if isinstance(parsed, stickwork.tokens.Compound):
		parts = tuple(p for p in (_strip_kick(part) for part in parsed.parts) if p is not None)
		if not parts:
			return None
		if len(parts) == 1:
			return parts[0]
		return stickwork.tokens.Compound(parts)

	return parsed


def _without_kick (token: str) -> str:

	"""Remove the kick from a voicing token; a token left empty becomes snare."""

	parsed = stickwork.tokens.parse_voicing_token(token)
	stripped = _strip_kick(parsed)

	if stripped is None:
		default = stickwork.tokens.Instrument(stickwork.constants.instruments.DEFAULT_INSTRUMENT)
		stripped = stickwork.tokens.Ghost(default) if stickwork.tokens.is_ghost(parsed) else default

	return stickwork.tokens.format_voicing_token(stripped)


def _classify (voicing_token: str, practice_pad_mode: bool) -> str:

	if stickwork.tokens.is_voicing_rest(voicing_token):
		return _REST

	if stickwork.tokens.has_kick(voicing_token) and not practice_pad_mode:
		return _KICK

	return _HAND


def sync_sticking_from_voicing (
	voicing: TokenInput,
	old_sticking: TokenInput,
	practice_pad_mode: bool = False,
	rng: typing.Optional[random.Random] = None,
	length: typing.Optional[int] = None
) -> typing.List[str]:

	"""
	Rebuild the sticking after a voicing edit.

	For each of ``length`` note slots (default: the voicing length), with both
	streams read cyclically:

	- a rest in the voicing makes the sticking a rest;
	- a kick in the voicing makes the sticking the kick limb, unless in
	  practice pad mode;
	- any other struck voicing keeps the previous sticking, unless that was a
	  rest or a kick limb, in which case a random hand is chosen.

	Parameters:
		voicing: Voicing tokens (text or list)
		old_sticking: The sticking before the edit
		practice_pad_mode: Never place the kick limb
		rng: Random source for repaired positions
		length: Number of note slots to produce

	Example:
		```python
		sync_sticking_from_voicing("S - K S", "R L R L")   # ["R", "-", "K", "L"]
		```
	"""

	voicing_tokens = stickwork.tokens.parse_tokens(voicing)
	old_tokens = stickwork.tokens.parse_tokens(old_sticking)

	if not voicing_tokens:
		return []

	rng = stickwork.sequence_utils.resolve_rng(rng)
	total = len(voicing_tokens) if length is None else length

	result: typing.List[str] = []
	repaired = 0

	for i in range(total):

		voicing_token = voicing_tokens[i % len(voicing_tokens)]
		prior = old_tokens[i % len(old_tokens)] if old_tokens else ""
		prior_limb = stickwork.tokens.main_limb(prior)
		kind = _classify(voicing_token, practice_pad_mode)

		if kind == _REST:
			result.append(stickwork.constants.limbs.REST)

		elif kind == _KICK:
			if prior_limb == stickwork.constants.limbs.KICK:
				result.append(prior)
			else:
				result.append(_replace_main_limb(prior, stickwork.constants.limbs.KICK) if prior_limb else stickwork.constants.limbs.KICK)

		elif prior_limb is None or prior_limb == stickwork.constants.limbs.KICK:
			hand = stickwork.sequence_utils.choose_hand(rng)
			result.append(_replace_main_limb(prior, hand) if prior_limb else hand)
			repaired += 1

		else:
			result.append(prior)

	if repaired:
		logger.debug(f"Assigned hands to {repaired} sticking position(s) after voicing edit")

	return result


def sync_voicing_from_sticking (
	sticking: TokenInput,
	old_voicing: TokenInput,
	practice_pad_mode: bool = False,
	length: typing.Optional[int] = None
) -> typing.List[str]:

	"""
	Rebuild the voicing after a sticking edit; the mirror of
	``sync_sticking_from_voicing``.

	- a sticking rest makes the voicing a rest;
	- the kick limb adds the kick to the voicing, as a compound when another
	  instrument is already there;
	- a hand removes any kick from the voicing (leaving snare if nothing else
	  remains) and strikes snare where the voicing was a rest.

	In practice pad mode the kick limb is read as a hand. Literal tokens that
	are not limbs leave the voicing untouched.
	"""

	sticking_tokens = stickwork.tokens.parse_tokens(sticking)
	old_tokens = stickwork.tokens.parse_tokens(old_voicing)

	if not sticking_tokens:
		return []

	total = len(sticking_tokens) if length is None else length
	result: typing.List[str] = []

	for i in range(total):

		sticking_token = sticking_tokens[i % len(sticking_tokens)]
		prior = old_tokens[i % len(old_tokens)] if old_tokens else stickwork.constants.instruments.REST
		limb = stickwork.tokens.main_limb(sticking_token)

		if limb is None:
			result.append(stickwork.constants.instruments.REST)
			continue

		if limb == stickwork.constants.limbs.KICK and practice_pad_mode:
			limb = stickwork.constants.limbs.RIGHT

		if limb == stickwork.constants.limbs.KICK:
			result.append(prior if stickwork.tokens.has_kick(prior) else _with_kick(prior))

		elif limb in stickwork.constants.limbs.HANDS:
			if stickwork.tokens.is_voicing_rest(prior):
				result.append(stickwork.constants.instruments.DEFAULT_INSTRUMENT)
			elif stickwork.tokens.has_kick(prior):
				result.append(_without_kick(prior))
			else:
				result.append(prior)

		else:
			result.append(prior)

	return result


def generate_sticking_cell (
	voicing: TokenInput,
	target_length: int,
	practice_pad_mode: bool = False,
	triplet: bool = False,
	rng: typing.Optional[random.Random] = None
) -> typing.List[str]:

	"""
	Generate a short sticking cell that tiles across ``target_length`` notes.

	The cell is 2-4 tokens long (3-4 on triplet grids), chosen among lengths
	that divide the bar and over which the voicing's rests and kicks repeat,
	so tiling never puts a hand on a rest or off a kick. When no such length
	exists the cell covers the whole bar.
	"""

	if target_length <= 0:
		return []

	rng = stickwork.sequence_utils.resolve_rng(rng)
	voicing_tokens = stickwork.tokens.parse_tokens(voicing) or [stickwork.constants.instruments.DEFAULT_INSTRUMENT]

	kinds = [_classify(token, practice_pad_mode) for token in stickwork.sequence_utils.tile(voicing_tokens, target_length)]

	min_length = 3 if triplet else 2
	candidates = [
		size for size in range(min_length, min(4, target_length) + 1)
		if target_length % size == 0 and kinds == stickwork.sequence_utils.tile(kinds[:size], target_length)
	]

	size = rng.choice(candidates) if candidates else target_length
	cell: typing.List[str] = []

	for kind in kinds[:size]:
		if kind == _REST:
			cell.append(stickwork.constants.limbs.REST)
		elif kind == _KICK:
			cell.append(stickwork.constants.limbs.KICK)
		else:
			cell.append(stickwork.sequence_utils.choose_hand(rng))

	return cell


def generate_sticking_for_voicing (
	voicing: TokenInput,
	target_length: int,
	practice_pad_mode: bool = False,
	triplet: bool = False,
	rng: typing.Optional[random.Random] = None
) -> typing.List[str]:

	"""
	Generate a plausible sticking for a voicing, ``target_length`` tokens long.

	A generated cell (see ``generate_sticking_cell``) tiled across the bar.
	"""

	cell = generate_sticking_cell(voicing, target_length, practice_pad_mode, triplet, rng)

	return stickwork.sequence_utils.tile(cell, target_length)


def enforce_practice_pad_voicing (voicing: TokenInput) -> typing.List[str]:

	"""
	Replace every struck voicing token with snare; rests are kept.

	Ghosted tokens stay ghosted.
	"""

	result: typing.List[str] = []

	for token in stickwork.tokens.parse_tokens(voicing):
		if stickwork.tokens.is_voicing_rest(token):
			result.append(token)
		elif stickwork.tokens.is_ghost(token):
			result.append(f"({stickwork.constants.instruments.SNARE})")
		else:
			result.append(stickwork.constants.instruments.SNARE)

	return result


def strip_kick_from_sticking (sticking: TokenInput, rng: typing.Optional[random.Random] = None) -> typing.List[str]:

	"""
	Replace the kick limb with a random hand wherever it appears.
	"""

	rng = stickwork.sequence_utils.resolve_rng(rng)
	result: typing.List[str] = []

	for token in stickwork.tokens.parse_tokens(sticking):
		if stickwork.tokens.main_limb(token) == stickwork.constants.limbs.KICK:
			result.append(_replace_main_limb(token, stickwork.sequence_utils.choose_hand(rng)))
		else:
			result.append(token)

	return result
