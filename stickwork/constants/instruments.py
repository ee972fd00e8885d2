"""Voicing alphabet.

A voicing token names which instrument(s) sound at a note slot. Codes are
case-insensitive on input and always upper case once normalized. Two-letter
tom codes are folded onto single letters so that every instrument has exactly
one canonical code.
"""

import typing


SNARE = "S"
KICK = "K"
HI_HAT = "H"
FLOOR_TOM = "F"
HIGH_TOM = "I"
MID_TOM = "M"

# Pedal hi-hat, only ever produced by left-foot expansion.
HI_HAT_FOOT = "HF"

REST = "-"
LEGACY_REST = "R"

REST_CODES: typing.FrozenSet[str] = frozenset({REST, LEGACY_REST})

COMPOUND_SEPARATOR = "+"
GHOST_OPEN = "("
GHOST_CLOSE = ")"

# Unknown letters are rendered as snare rather than rejected.
DEFAULT_INSTRUMENT = SNARE

INSTRUMENT_ALIASES: typing.Dict[str, str] = {
	"S": SNARE,
	"K": KICK,
	"H": HI_HAT,
	"F": FLOOR_TOM,
	"I": HIGH_TOM,
	"HT": HIGH_TOM,
	"T": HIGH_TOM,
	"M": MID_TOM,
	"MT": MID_TOM,
	"HF": HI_HAT_FOOT,
}

INSTRUMENT_NAMES: typing.Dict[str, str] = {
	SNARE: "snare",
	KICK: "kick",
	HI_HAT: "hi-hat",
	FLOOR_TOM: "floor",
	HIGH_TOM: "tom",
	MID_TOM: "mid-tom",
	HI_HAT_FOOT: "hi-hat-foot",
}

VOICE_CODES: typing.Dict[str, str] = {name: code for code, name in INSTRUMENT_NAMES.items()}
