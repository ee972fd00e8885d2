import dataclasses
import logging
import typing

import stickwork.constants.instruments
import stickwork.constants.limbs


logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class Rest:

	"""
	A silent note slot, in either stream.
	"""


@dataclasses.dataclass(frozen=True)
class Instrument:

	"""
	A single instrument struck at a note slot.
	"""

	code: str


@dataclasses.dataclass(frozen=True)
class Compound:

	"""
	Several instruments struck together (``S+K``). Parts may be ghosted.
	"""

	parts: typing.Tuple[typing.Union[Instrument, "Ghost"], ...]


@dataclasses.dataclass(frozen=True)
class Ghost:

	"""
	A quietly struck voicing, written in parentheses (``(S)`` or ``(S+K)``).
	"""

	inner: typing.Union[Instrument, Compound]


@dataclasses.dataclass(frozen=True)
class Limb:

	"""
	A plain sticking limb (``R``, ``L``, ``K``) or an unrecognised literal.
	"""

	code: str


@dataclasses.dataclass(frozen=True)
class Ornament:

	"""
	A flam, drag or ruff: grace limbs played just before the main limb.

	Occupies one note slot; the grace notes do not advance the note index.
	"""

	grace_limbs: typing.Tuple[str, ...]
	main_limb: str

	@property
	def kind (self) -> str:

		"""``flam``, ``drag`` or ``ruff`` by the number of grace notes."""

		return stickwork.constants.limbs.ORNAMENT_KINDS[len(self.grace_limbs)]

	def __str__ (self) -> str:
		return "".join(g.lower() for g in self.grace_limbs) + self.main_limb


VoicingToken = typing.Union[Rest, Instrument, Compound, Ghost]
StickingToken = typing.Union[Rest, Limb, Ornament]


def parse_tokens (value: typing.Union[str, typing.Sequence[str], None]) -> typing.List[str]:

	"""
	Split token text on whitespace.

	A run of non-whitespace characters is always one token, so a flam
	(``lR``), a compound (``S+K``) and a ghost note (``(S)``) each stay whole.
	An already-split sequence is returned as a list unchanged.

	Example:
		```python
		parse_tokens("  S+K  (S) lR ")   # ["S+K", "(S)", "lR"]
		```
	"""

	if not value:
		return []

	if not isinstance(value, str):
		return list(value)

	return value.split()


def format_list (tokens: typing.Iterable[typing.Union[str, int]]) -> str:

	"""Join tokens (or numbers) with single spaces."""

	return " ".join(str(token) for token in tokens)


def normalize_whitespace (text: str) -> str:

	"""Collapse whitespace runs to single spaces and trim the ends."""

	return " ".join(text.split())


def parse_number_list (text: str) -> typing.List[int]:

	"""
	Parse a space-separated list of positive integers, dropping anything else.
	"""

	numbers: typing.List[int] = []

	for token in parse_tokens(text):
		try:
			number = int(token)
		except ValueError:
			continue
		if number > 0:
			numbers.append(number)

	return numbers


def normalize_instrument (code: str) -> str:

	"""
	Map an instrument code to its canonical form.

	Tom spellings fold onto single letters (``Ht`` -> ``I``, ``Mt`` -> ``M``).
	Unknown letters become snare so that notation always has something to draw.
	"""

	upper = code.strip().upper()
	canonical = stickwork.constants.instruments.INSTRUMENT_ALIASES.get(upper)

	if canonical is None:
		logger.debug(f"Unknown instrument code {code!r} mapped to snare")
		return stickwork.constants.instruments.DEFAULT_INSTRUMENT

	return canonical


def _is_wrapped (token: str) -> bool:

	return (
		len(token) >= 2
		and token.startswith(stickwork.constants.instruments.GHOST_OPEN)
		and token.endswith(stickwork.constants.instruments.GHOST_CLOSE)
	)


def _parse_voicing_part (part: str) -> typing.Union[Instrument, Ghost]:

	if _is_wrapped(part):
		return Ghost(Instrument(normalize_instrument(part[1:-1])))

	# Unbalanced parentheses from a half-typed token still mark a ghost note.
	if stickwork.constants.instruments.GHOST_OPEN in part or stickwork.constants.instruments.GHOST_CLOSE in part:
		stripped = part.strip("()")
		return Ghost(Instrument(normalize_instrument(stripped)))

	return Instrument(normalize_instrument(part))


def parse_voicing_token (token: str) -> VoicingToken:

	"""
	Classify one voicing token.

	``-`` and the legacy ``R`` are rests. ``A+B`` is a compound whose parts
	may be individually ghosted (``(S)+K``). ``(A)`` or ``(A+B)`` ghosts the
	whole token.
	"""

	token = token.strip()

	if not token or token.upper() in stickwork.constants.instruments.REST_CODES:
		return Rest()

	if _is_wrapped(token) and stickwork.constants.instruments.COMPOUND_SEPARATOR in token[1:-1]:
		inner = parse_voicing_token(token[1:-1])
		if isinstance(inner, Compound):
			return Ghost(inner)

	parts = [
		p for p in token.split(stickwork.constants.instruments.COMPOUND_SEPARATOR)
		if p.strip("() ") and p.strip("() ").upper() not in stickwork.constants.instruments.REST_CODES
	]

	if not parts:
		return Rest()

	parsed = [_parse_voicing_part(p) for p in parts]

	if len(parsed) == 1:
		return parsed[0]

	return Compound(tuple(parsed))


def voicing_codes (token: typing.Union[str, VoicingToken]) -> typing.List[str]:

	"""Return the instrument codes a voicing token strikes, in written order."""

	if isinstance(token, str):
		token = parse_voicing_token(token)

	if isinstance(token, Rest):
		return []

	if isinstance(token, Instrument):
		return [token.code]

	if isinstance(token, Ghost):
		return voicing_codes(token.inner)

	codes: typing.List[str] = []
	for part in token.parts:
		codes.extend(voicing_codes(part))
	return codes


def unknown_voicing_codes (token: str) -> typing.List[str]:

	"""
	Instrument codes in a voicing token that are not in the voicing alphabet.

	Parsing maps such codes to snare, so this is the only place they are still
	visible. Rests and ghost parentheses are ignored.

	Example:
		```python
		unknown_voicing_codes("(S)+Z")   # ["Z"]
		```
	"""

	unknown: typing.List[str] = []

	for part in token.strip().split(stickwork.constants.instruments.COMPOUND_SEPARATOR):
		code = part.strip("() ").upper()
		if not code or code in stickwork.constants.instruments.REST_CODES:
			continue
		if code not in stickwork.constants.instruments.INSTRUMENT_ALIASES:
			unknown.append(part.strip("() "))

	return unknown


def is_voicing_rest (token: str) -> bool:

	return isinstance(parse_voicing_token(token), Rest)


def is_ghost (token: typing.Union[str, VoicingToken]) -> bool:

	"""True when the token, or any part of a compound, is ghosted."""

	if isinstance(token, str):
		token = parse_voicing_token(token)

	if isinstance(token, Ghost):
		return True

	if isinstance(token, Compound):
		return any(isinstance(part, Ghost) for part in token.parts)

	return False


def has_kick (token: str) -> bool:

	return stickwork.constants.instruments.KICK in voicing_codes(token)


def format_voicing_token (token: VoicingToken) -> str:

	"""Write a parsed voicing token back in its canonical textual form."""

	if isinstance(token, Rest):
		return stickwork.constants.instruments.REST

	if isinstance(token, Instrument):
		return token.code

	if isinstance(token, Ghost):
		return f"({format_voicing_token(token.inner)})"

	return stickwork.constants.instruments.COMPOUND_SEPARATOR.join(format_voicing_token(p) for p in token.parts)


def parse_ornament (token: str) -> typing.Optional[Ornament]:

	"""
	Parse a flam/drag/ruff sticking token.

	Returns None for anything that is not one to three lower-case grace limbs
	followed by one upper-case main limb.

	Example:
		```python
		parse_ornament("llR")   # Ornament(grace_limbs=("L", "L"), main_limb="R")
		parse_ornament("R")     # None
		```
	"""

	match = stickwork.constants.limbs.ORNAMENT_PATTERN.match(token.strip())

	if match is None:
		return None

	graces, main = match.groups()

	return Ornament(tuple(g.upper() for g in graces), main)


def parse_sticking_token (token: str) -> StickingToken:

	"""
	Classify one sticking token.

	Single limb letters are case-insensitive. Tokens that are neither a limb,
	a rest nor a valid ornament are kept as literal ``Limb`` values.
	"""

	token = token.strip()

	if not token or token == stickwork.constants.limbs.REST:
		return Rest()

	ornament = parse_ornament(token)
	if ornament is not None:
		return ornament

	if token.upper() in stickwork.constants.limbs.MAIN_LIMBS and len(token) == 1:
		return Limb(token.upper())

	return Limb(token)


def is_sticking_rest (token: str) -> bool:

	return isinstance(parse_sticking_token(token), Rest)


def main_limb (token: str) -> typing.Optional[str]:

	"""
	The limb that plays the main note of a sticking token, or None for a rest.

	Ornaments report their main limb; literal tokens report themselves.
	"""

	parsed = parse_sticking_token(token)

	if isinstance(parsed, Rest):
		return None

	if isinstance(parsed, Ornament):
		return parsed.main_limb

	return parsed.code
