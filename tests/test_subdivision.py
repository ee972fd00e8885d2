import fractions

import pytest

import stickwork.constants.subdivisions
import stickwork.subdivision


def test_parse_time_signature () -> None:

	"""Well-formed text parses to beats over beat unit."""

	signature = stickwork.subdivision.parse_time_signature("7/8")

	assert signature == stickwork.subdivision.TimeSignature(7, 8)
	assert str(signature) == "7/8"


def test_parse_time_signature_lenient_fallback () -> None:

	"""Malformed text falls back to 4/4 and zero terms are raised to 1."""

	assert stickwork.subdivision.parse_time_signature("abc") == stickwork.subdivision.TimeSignature(4, 4)
	assert stickwork.subdivision.parse_time_signature("0/4") == stickwork.subdivision.TimeSignature(1, 4)


def test_parse_time_signature_strict () -> None:

	"""The strict parser raises with the user-facing message."""

	with pytest.raises(stickwork.subdivision.TimeSignatureError, match="format X/Y"):
		stickwork.subdivision.parse_time_signature("4-4", strict=True)

	with pytest.raises(stickwork.subdivision.TimeSignatureError, match="required"):
		stickwork.subdivision.parse_time_signature("", strict=True)


def test_validate_time_signature () -> None:

	"""Validation returns a message or None."""

	assert stickwork.subdivision.validate_time_signature("3/4") is None
	assert stickwork.subdivision.validate_time_signature(" ") == "Time signature is required"
	assert stickwork.subdivision.validate_time_signature("3:4") == "Time signature must be in format X/Y (e.g., 4/4)"


@pytest.mark.parametrize("signature, subdivision, expected", [
	("4/4", 16, 16),
	("4/4", 8, 8),
	("3/4", 12, 9),
	("6/8", 8, 6),
	("6/8", 16, 12),
	("5/4", 4, 5),
	("7/8", 4, 3),
])
def test_notes_per_bar (signature: str, subdivision: int, expected: int) -> None:

	"""Beats times subdivision over beat unit, truncated."""

	assert stickwork.subdivision.notes_per_bar(signature, subdivision) == expected


def test_notes_per_beat () -> None:

	"""Triplet grids give three or six slots per quarter-note beat."""

	assert stickwork.subdivision.notes_per_beat(12) == 3
	assert stickwork.subdivision.notes_per_beat(24) == 6
	assert stickwork.subdivision.notes_per_beat(16) == 4
	assert stickwork.subdivision.notes_per_beat(2) == 1


def test_notes_per_bar_advanced () -> None:

	"""Per-beat subdivisions add up beat by beat."""

	total, counts = stickwork.subdivision.notes_per_bar_advanced("4/4", [16, 12, 8, 4])

	assert total == 10
	assert counts == [4, 3, 2, 1]


def test_notes_per_bar_advanced_partial_list () -> None:

	"""A list shorter than the bar counts only the beats supplied."""

	total, counts = stickwork.subdivision.notes_per_bar_advanced("4/4", [16, 8])

	assert total == 6
	assert counts == [4, 2]


def test_notes_per_bar_advanced_compound_meter () -> None:

	"""A beat of a compound meter may hold a fractional share of the grid."""

	assert stickwork.subdivision.notes_per_bar_advanced("6/8", [12] * 6) == (9, [2, 1, 2, 1, 2, 1])
	assert stickwork.subdivision.notes_per_bar_advanced("6/8", [8] * 6) == (6, [1] * 6)
	assert stickwork.subdivision.notes_per_bar_advanced("4/8", [4] * 4) == (2, [1, 0, 1, 0])


@pytest.mark.parametrize("signature", ["2/4", "3/4", "5/4", "6/8", "7/8", "12/8"])
def test_uniform_per_beat_list_matches_standard_bar (signature: str) -> None:

	"""The same grid on every beat gives the standard note count."""

	beats = stickwork.subdivision.parse_time_signature(signature).beats_per_bar

	for subdivision in stickwork.constants.subdivisions.VALID_SUBDIVISIONS:
		total, counts = stickwork.subdivision.notes_per_bar_advanced(signature, [subdivision] * beats)
		assert total == stickwork.subdivision.notes_per_bar(signature, subdivision)
		assert sum(counts) == total
		assert len(stickwork.subdivision.note_positions_advanced(signature, [subdivision] * beats)) == total


def test_note_positions_advanced () -> None:

	"""The third of four slots in beat 2 sits at 2 + 2/4."""

	positions = stickwork.subdivision.note_positions_advanced("4/4", [8, 12, 16])

	assert positions[:2] == [0, fractions.Fraction(1, 2)]
	assert positions[2:5] == [1, fractions.Fraction(4, 3), fractions.Fraction(5, 3)]
	assert positions[7] == fractions.Fraction(5, 2)


def test_note_positions_uniform () -> None:

	"""Uniform positions are evenly spaced in beats."""

	positions = stickwork.subdivision.note_positions("3/4", 12)

	assert len(positions) == 9
	assert positions[3] == 1
	assert positions[4] == fractions.Fraction(4, 3)
	assert stickwork.subdivision.beat_index_for_note(positions, 8) == 2


def test_subdivision_labels () -> None:

	"""Labels, descriptions and slot durations come from the subdivision."""

	assert stickwork.subdivision.is_triplet(12)
	assert not stickwork.subdivision.is_triplet(16)
	assert stickwork.subdivision.subdivision_text(24) == "16th (sextuplets)"
	assert stickwork.subdivision.subdivision_description(12) == "Eighth note triplets"
	assert stickwork.subdivision.duration_for_subdivision(4) == "q"
	assert stickwork.subdivision.duration_for_subdivision(12) == "8"
