import random
import typing

import stickwork.constants.limbs

T = typing.TypeVar("T")


def resolve_rng (rng: typing.Optional[random.Random]) -> random.Random:

	"""Return the given generator, or a fresh unseeded one."""

	return rng if rng is not None else random.Random()


def tile (items: typing.Sequence[T], length: int) -> typing.List[T]:

	"""
	Repeat a short cell cyclically to exactly ``length`` items.

	An empty cell yields an empty list.
	"""

	if not items:
		return []

	return [items[i % len(items)] for i in range(length)]


def choose_hand (rng: random.Random) -> str:

	"""Pick right or left hand with equal probability."""

	return rng.choice(stickwork.constants.limbs.HANDS)


def weighted_choice (options: typing.List[typing.Tuple[T, float]], rng: random.Random) -> T:

	"""Pick one item from a list of (value, weight) pairs.

	Weights are relative - they don't need to sum to 1.0. Higher weight means
	higher probability of selection.

	Parameters:
		options: List of `(value, weight)` tuples
		rng: Random number generator instance

	Example:
		```python
		subdivision = stickwork.sequence_utils.weighted_choice([
			(8, 0.3),
			(16, 0.5),
			(12, 0.2),
		], rng)
		```
	"""

	if not options:
		raise ValueError("Options list cannot be empty")

	total = sum(weight for _, weight in options)

	if total <= 0:
		raise ValueError("Total weight must be positive")

	threshold = rng.random() * total
	cumulative = 0.0

	for value, weight in options:
		cumulative += weight
		if cumulative > threshold:
			return value

	return options[-1][0]
