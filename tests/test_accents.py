import itertools

import stickwork.accents


def test_filter_accents_drops_outside_bar () -> None:

	"""Accents at or beyond the bar length are dropped."""

	assert stickwork.accents.filter_accents([0, 4, 8, 12], 8) == frozenset({0, 4})
	assert stickwork.accents.filter_accents([-1, 3], 4) == frozenset({3})


def test_derive_grouping_examples () -> None:

	"""Run lengths start on every accent; an unaccented lead-in is marked with a zero."""

	assert stickwork.accents.derive_grouping_from_accents({0, 2, 4, 6}, 8) == [2, 2, 2, 2]
	assert stickwork.accents.derive_grouping_from_accents({0, 3, 6}, 8) == [3, 3, 2]
	assert stickwork.accents.derive_grouping_from_accents({4}, 8) == [0, 4, 4]
	assert stickwork.accents.derive_grouping_from_accents(set(), 4) == [0, 4]


def test_grouping_sums_to_bar () -> None:

	"""Every grouping covers the whole bar."""

	for accents in [set(), {0}, {5}, {1, 2, 9}]:
		assert sum(stickwork.accents.derive_grouping_from_accents(accents, 12)) == 12


def test_accents_survive_grouping_conversion () -> None:

	"""Every accent subset of a small bar converts to a grouping and back unchanged."""

	notes = 6

	for size in range(notes + 1):
		for subset in itertools.combinations(range(notes), size):
			grouping = stickwork.accents.derive_grouping_from_accents(subset, notes)
			assert stickwork.accents.accents_from_grouping(grouping) == frozenset(subset)


def test_legacy_grouping_without_marker () -> None:

	"""Groupings without the marker accent every run start."""

	assert stickwork.accents.accents_from_grouping([4, 4, 4, 4]) == frozenset({0, 4, 8, 12})
	assert stickwork.accents.accents_from_grouping([3, 3, 2]) == frozenset({0, 3, 6})
	assert stickwork.accents.accents_from_grouping([]) == frozenset()


def test_phrase_text () -> None:

	"""Phrase text is the space-separated grouping."""

	assert stickwork.accents.phrase_text_from_accents({0, 4, 8, 12}, 16) == "4 4 4 4"
	assert stickwork.accents.phrase_text_from_accents(set(), 16) == "0 16"
	assert stickwork.accents.accents_from_phrase_text("0 2 6") == frozenset({2})
	assert stickwork.accents.accents_from_phrase_text("4 x 4") == frozenset({0, 4})
