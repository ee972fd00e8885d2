import pytest

import stickwork.tokens


def test_parse_tokens_splits_on_whitespace () -> None:

	"""Runs of non-whitespace are single tokens, including compounds and flams."""

	assert stickwork.tokens.parse_tokens("  S+K  (S) lR ") == ["S+K", "(S)", "lR"]


def test_parse_tokens_empty_and_lists () -> None:

	"""Empty input gives no tokens and an already-split list passes through."""

	assert stickwork.tokens.parse_tokens("") == []
	assert stickwork.tokens.parse_tokens(None) == []
	assert stickwork.tokens.parse_tokens(["S", "K"]) == ["S", "K"]


def test_format_list_round_trips_normalized_text () -> None:

	"""Formatting parsed tokens gives the whitespace-normalized text."""

	text = "  R   L\tR  R "

	assert stickwork.tokens.format_list(stickwork.tokens.parse_tokens(text)) == stickwork.tokens.normalize_whitespace(text)
	assert stickwork.tokens.format_list([4, 4, 8]) == "4 4 8"


def test_parse_number_list_drops_invalid () -> None:

	"""Only positive integers survive."""

	assert stickwork.tokens.parse_number_list("4 x 0 -2 3") == [4, 3]


def test_voicing_rests () -> None:

	"""Dash and the legacy R are rests."""

	assert stickwork.tokens.parse_voicing_token("-") == stickwork.tokens.Rest()
	assert stickwork.tokens.parse_voicing_token("R") == stickwork.tokens.Rest()
	assert stickwork.tokens.is_voicing_rest("-")
	assert not stickwork.tokens.is_voicing_rest("S")


def test_voicing_instruments_and_aliases () -> None:

	"""Tom spellings fold onto canonical codes and unknown letters become snare."""

	assert stickwork.tokens.parse_voicing_token("Ht") == stickwork.tokens.Instrument("I")
	assert stickwork.tokens.parse_voicing_token("Mt") == stickwork.tokens.Instrument("M")
	assert stickwork.tokens.parse_voicing_token("k") == stickwork.tokens.Instrument("K")
	assert stickwork.tokens.parse_voicing_token("Z") == stickwork.tokens.Instrument("S")


def test_voicing_compound () -> None:

	"""A plus sign joins instruments struck together."""

	parsed = stickwork.tokens.parse_voicing_token("S+K")

	assert parsed == stickwork.tokens.Compound((stickwork.tokens.Instrument("S"), stickwork.tokens.Instrument("K")))
	assert stickwork.tokens.voicing_codes("S+K") == ["S", "K"]
	assert stickwork.tokens.has_kick("S+K")
	assert not stickwork.tokens.has_kick("S+H")


def test_voicing_compound_ignores_rest_parts () -> None:

	"""Rest parts inside a compound do not strike anything."""

	assert stickwork.tokens.voicing_codes("S+-") == ["S"]
	assert stickwork.tokens.is_voicing_rest("-+-")


def test_voicing_ghost_notes () -> None:

	"""Parentheses ghost a single instrument, a whole compound, or one part."""

	assert stickwork.tokens.parse_voicing_token("(S)") == stickwork.tokens.Ghost(stickwork.tokens.Instrument("S"))
	assert isinstance(stickwork.tokens.parse_voicing_token("(S+K)"), stickwork.tokens.Ghost)
	assert stickwork.tokens.is_ghost("(S)+K")
	assert not stickwork.tokens.is_ghost("S+K")
	assert stickwork.tokens.voicing_codes("(S+K)") == ["S", "K"]


def test_format_voicing_token () -> None:

	"""Parsed tokens write back in canonical form."""

	for text in ["-", "S", "S+K", "(S)", "(S+K)", "(S)+K"]:
		assert stickwork.tokens.format_voicing_token(stickwork.tokens.parse_voicing_token(text)) == text


def test_parse_ornament () -> None:

	"""One to three lower-case graces before an upper-case main limb."""

	assert stickwork.tokens.parse_ornament("lR") == stickwork.tokens.Ornament(("L",), "R")
	assert stickwork.tokens.parse_ornament("llR").kind == "drag"
	assert stickwork.tokens.parse_ornament("rrrL").kind == "ruff"
	assert stickwork.tokens.parse_ornament("R") is None
	assert stickwork.tokens.parse_ornament("llllR") is None
	assert str(stickwork.tokens.Ornament(("R", "L"), "K")) == "rlK"


@pytest.mark.parametrize("token, expected", [
	("-", None),
	("R", "R"),
	("l", "L"),
	("K", "K"),
	("rL", "L"),
	("X", "X"),
])
def test_main_limb (token: str, expected: str) -> None:

	"""Ornaments report their main limb; literals report themselves."""

	assert stickwork.tokens.main_limb(token) == expected


def test_sticking_rest () -> None:

	"""Only the dash is a sticking rest."""

	assert stickwork.tokens.is_sticking_rest("-")
	assert not stickwork.tokens.is_sticking_rest("R")


def test_unknown_voicing_codes () -> None:

	"""Codes outside the drum alphabet are reported; rests and ghosts are not."""

	assert stickwork.tokens.unknown_voicing_codes("(S)+Z") == ["Z"]
	assert stickwork.tokens.unknown_voicing_codes("Q") == ["Q"]
	assert stickwork.tokens.unknown_voicing_codes("Ht+K") == []
	assert stickwork.tokens.unknown_voicing_codes("(S+H)") == []
	assert stickwork.tokens.unknown_voicing_codes("-") == []
	assert stickwork.tokens.unknown_voicing_codes("(S") == []
