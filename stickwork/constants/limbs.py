"""Sticking alphabet.

A sticking token names which limb plays a note slot. Ornaments (flams, drags
and ruffs) prefix the main limb with one to three lower-case grace limbs, for
example ``lR`` or ``rrL``, and still occupy a single note slot.
"""

import re
import typing


RIGHT = "R"
LEFT = "L"
KICK = "K"
REST = "-"

HANDS: typing.Tuple[str, str] = (RIGHT, LEFT)

MAIN_LIMBS: typing.FrozenSet[str] = frozenset({RIGHT, LEFT, KICK})

ORNAMENT_PATTERN = re.compile(r"^([lr]{1,3})([RLK])$")

ORNAMENT_KINDS: typing.Dict[int, str] = {
	1: "flam",
	2: "drag",
	3: "ruff",
}

# Polyrhythm limb names and the sticking code each one is notated with.
LIMB_NAMES: typing.Dict[str, str] = {
	"right-hand": RIGHT,
	"left-hand": LEFT,
	"right-foot": KICK,
	"left-foot": KICK,
}
