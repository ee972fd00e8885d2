"""
Accents and legacy phrase groupings.

Accent indices are the only authoritative record of where a bar is accented.
Older consumers describe the same thing as a grouping, a list of run lengths
where every run starts on an accent (``[3, 3, 2]`` accents 0, 3 and 6).

A grouping has no way to say "the first note is not accented", so when index 0
is unaccented the grouping starts with a zero-length marker run followed by
the unaccented lead-in: ``{4}`` over 8 notes is ``[0, 4, 4]`` and an empty
accent set over 8 notes is ``[0, 8]``. Groupings without the marker (the
legacy phrase strings) read every run start as an accent.
"""

import logging
import typing

import stickwork.tokens


logger = logging.getLogger(__name__)


def filter_accents (accents: typing.Iterable[int], notes_per_bar: int) -> typing.FrozenSet[int]:

	"""
	Keep only accents that fall inside a bar of ``notes_per_bar`` notes.

	Accents beyond the end are the expected fallout of shrinking a bar and are
	dropped without complaint.
	"""

	given = set(accents)
	kept = frozenset(a for a in given if 0 <= a < notes_per_bar)

	dropped = given - kept
	if dropped:
		logger.debug(f"Dropped accents {sorted(dropped)} outside a {notes_per_bar}-note bar")

	return kept


def derive_grouping_from_accents (accents: typing.Iterable[int], notes_per_bar: int) -> typing.List[int]:

	"""
	Convert accent indices to run lengths that sum to ``notes_per_bar``.

	Example:
		```python
		derive_grouping_from_accents({0, 2, 4, 6}, 8)   # [2, 2, 2, 2]
		derive_grouping_from_accents({4}, 8)            # [0, 4, 4]
		derive_grouping_from_accents(set(), 4)          # [0, 4]
		```
	"""

	starts = sorted(filter_accents(accents, notes_per_bar))
	grouping: typing.List[int] = []

	if not starts or starts[0] > 0:
		lead_in = starts[0] if starts else notes_per_bar
		grouping.extend([0, lead_in])

	for i, start in enumerate(starts):
		end = starts[i + 1] if i + 1 < len(starts) else notes_per_bar
		grouping.append(end - start)

	return grouping


def accents_from_grouping (groups: typing.Sequence[int]) -> typing.FrozenSet[int]:

	"""
	Convert run lengths back to accent indices (the start of every run).

	A leading zero marks the following run as an unaccented lead-in.
	"""

	groups = list(groups)
	accents: typing.Set[int] = set()
	index = 0

	if groups and groups[0] == 0:
		index = groups[1] if len(groups) > 1 else 0
		groups = groups[2:]

	for length in groups:
		if length <= 0:
			continue
		accents.add(index)
		index += length

	return frozenset(accents)


def phrase_text_from_accents (accents: typing.Iterable[int], notes_per_bar: int) -> str:

	"""Legacy space-separated phrase text for a set of accents."""

	return stickwork.tokens.format_list(derive_grouping_from_accents(accents, notes_per_bar))


def accents_from_phrase_text (text: str) -> typing.FrozenSet[int]:

	"""
	Read accents from legacy phrase text such as ``"4 4 4 4"`` or ``"0 4 4"``.
	"""

	groups: typing.List[int] = []

	for token in stickwork.tokens.parse_tokens(text):
		try:
			groups.append(int(token))
		except ValueError:
			continue

	return accents_from_grouping(groups)
