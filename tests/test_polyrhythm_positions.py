import fractions

import pytest

import stickwork.polyrhythm_positions


def test_four_against_three () -> None:

	"""4:3 over four beats aligns only on the downbeat."""

	result = stickwork.polyrhythm_positions.calculate_positions(4, 3, 4)

	assert result.right_positions == [0, 1, 2, 3]
	assert result.left_positions == [0, fractions.Fraction(4, 3), fractions.Fraction(8, 3)]
	assert result.alignments == [stickwork.polyrhythm_positions.Alignment(0, 0)]


def test_three_against_two_in_three_four () -> None:

	"""Positions are spread across the whole bar whatever the beat count."""

	result = stickwork.polyrhythm_positions.calculate_positions(3, 2, 3)

	assert result.right_positions == [0, 1, 2]
	assert result.left_positions == [0, fractions.Fraction(3, 2)]
	assert result.alignments == [stickwork.polyrhythm_positions.Alignment(0, 0)]


def test_shared_factor_aligns_more_than_once () -> None:

	"""4:2 coincides on every left note."""

	result = stickwork.polyrhythm_positions.calculate_positions(4, 2, 4)

	assert result.alignments == [
		stickwork.polyrhythm_positions.Alignment(0, 0),
		stickwork.polyrhythm_positions.Alignment(2, 1),
	]


def test_left_note_claimed_once () -> None:

	"""With a generous tolerance each left note still aligns with one right note at most."""

	result = stickwork.polyrhythm_positions.calculate_positions(8, 2, 4, tolerance=1.0)

	left_indices = [a.left_index for a in result.alignments]

	assert len(left_indices) == len(set(left_indices))
	assert result.alignments[0] == stickwork.polyrhythm_positions.Alignment(0, 0)


def test_position_counts () -> None:

	"""Each rhythm has exactly its ratio term of notes."""

	for n in range(1, 8):
		for m in range(1, 8):
			result = stickwork.polyrhythm_positions.calculate_positions(n, m, 4)
			assert len(result.right_positions) == n
			assert len(result.left_positions) == m
			assert stickwork.polyrhythm_positions.Alignment(0, 0) in result.alignments


def test_non_positive_terms_raise () -> None:

	"""Zero or negative terms are programming errors."""

	with pytest.raises(ValueError):
		stickwork.polyrhythm_positions.calculate_positions(0, 3, 4)

	with pytest.raises(ValueError):
		stickwork.polyrhythm_positions.calculate_positions(3, 2, 0)


def test_cycle_length () -> None:

	"""The cycle is the least common multiple of the terms."""

	assert stickwork.polyrhythm_positions.cycle_length(3, 2) == 6
	assert stickwork.polyrhythm_positions.cycle_length(4, 6) == 12
	assert stickwork.polyrhythm_positions.lcm(5, 5) == 5


@pytest.mark.parametrize("count", [1, 2, 3, 5, 7])
@pytest.mark.parametrize("beats", [2, 3, 4, 7])
def test_unity_ratio_aligns_every_note (count: int, beats: int) -> None:

	"""N:N coincides note for note."""

	result = stickwork.polyrhythm_positions.calculate_positions(count, count, beats)

	assert result.right_positions == result.left_positions
	assert result.alignments == [stickwork.polyrhythm_positions.Alignment(i, i) for i in range(count)]
