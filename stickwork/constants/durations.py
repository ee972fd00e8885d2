"""Notated duration codes.

Each code is the short name the notation layer uses for a note value, paired
with its length in beats where one beat is a quarter note. Lengths are exact
``Fraction`` values so that tuplet checks never depend on float rounding.

The compound ladder applies when the beat unit is an eighth note and the beat
is felt as a dotted quarter (6/8, 9/8, 12/8).
"""

import fractions
import typing


WHOLE = "w"
HALF = "h"
QUARTER = "q"
EIGHTH = "8"
SIXTEENTH = "16"
THIRTYSECOND = "32"

DOTTED_WHOLE = "wd"
DOTTED_HALF = "hd"
DOTTED_QUARTER = "qd"

SIMPLE_LADDER: typing.List[typing.Tuple[str, fractions.Fraction]] = [
	(WHOLE, fractions.Fraction(4)),
	(HALF, fractions.Fraction(2)),
	(QUARTER, fractions.Fraction(1)),
	(EIGHTH, fractions.Fraction(1, 2)),
	(SIXTEENTH, fractions.Fraction(1, 4)),
	(THIRTYSECOND, fractions.Fraction(1, 8)),
]

COMPOUND_LADDER: typing.List[typing.Tuple[str, fractions.Fraction]] = [
	(DOTTED_WHOLE, fractions.Fraction(3)),
	(DOTTED_HALF, fractions.Fraction(3, 2)),
	(DOTTED_QUARTER, fractions.Fraction(1)),
	(EIGHTH, fractions.Fraction(1, 2)),
	(SIXTEENTH, fractions.Fraction(1, 4)),
	(THIRTYSECOND, fractions.Fraction(1, 8)),
]
