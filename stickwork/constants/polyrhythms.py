"""Common polyrhythm ratios offered as starting points."""

import typing


COMMON_POLYRHYTHMS: typing.List[typing.Dict[str, typing.Any]] = [
	{"numerator": 3, "denominator": 2, "name": "3 against 2", "description": "Triplets against eighth notes"},
	{"numerator": 4, "denominator": 3, "name": "4 against 3", "description": "Four notes against three"},
	{"numerator": 5, "denominator": 4, "name": "5 against 4", "description": "Five notes against four"},
	{"numerator": 5, "denominator": 3, "name": "5 against 3", "description": "Five notes against three"},
	{"numerator": 7, "denominator": 4, "name": "7 against 4", "description": "Seven notes against four"},
	{"numerator": 3, "denominator": 4, "name": "3 against 4", "description": "Three notes against four"},
]
