"""Supported subdivision grids.

A subdivision is expressed as a note-value denominator: 4 = quarter notes,
16 = sixteenth notes. 12 and 24 are the triplet grids (eighth-note triplets and
sixteenth-note sextuplets).
"""

import typing

import stickwork.constants.durations


QUARTER = 4
EIGHTH = 8
EIGHTH_TRIPLET = 12
SIXTEENTH = 16
SIXTEENTH_SEXTUPLET = 24
THIRTYSECOND = 32

VALID_SUBDIVISIONS: typing.Tuple[int, ...] = (4, 8, 12, 16, 24, 32)

TRIPLET_SUBDIVISIONS: typing.FrozenSet[int] = frozenset({EIGHTH_TRIPLET, SIXTEENTH_SEXTUPLET})

DEFAULT_SUBDIVISION = SIXTEENTH

# Triplet grids are beamed with the duration of the grid they subdivide.
SUBDIVISION_DURATIONS: typing.Dict[int, str] = {
	QUARTER: stickwork.constants.durations.QUARTER,
	EIGHTH: stickwork.constants.durations.EIGHTH,
	EIGHTH_TRIPLET: stickwork.constants.durations.EIGHTH,
	SIXTEENTH: stickwork.constants.durations.SIXTEENTH,
	SIXTEENTH_SEXTUPLET: stickwork.constants.durations.SIXTEENTH,
	THIRTYSECOND: stickwork.constants.durations.THIRTYSECOND,
}

SUBDIVISION_LABELS: typing.Dict[int, str] = {
	QUARTER: "4th",
	EIGHTH: "8th",
	EIGHTH_TRIPLET: "8th (triplets)",
	SIXTEENTH: "16th",
	SIXTEENTH_SEXTUPLET: "16th (sextuplets)",
	THIRTYSECOND: "32nd",
}

SUBDIVISION_DESCRIPTIONS: typing.Dict[int, str] = {
	QUARTER: "Quarter notes",
	EIGHTH: "Eighth notes",
	EIGHTH_TRIPLET: "Eighth note triplets",
	SIXTEENTH: "Sixteenth notes",
	SIXTEENTH_SEXTUPLET: "Sixteenth note sextuplets",
	THIRTYSECOND: "Thirty-second notes",
}
