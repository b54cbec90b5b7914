"""
Question ordering for the quiz runner.
Provides the Fisher-Yates shuffle used to randomize a question bank.
"""
import random
from functools import partial
from typing import Callable, List, Optional, Sequence, TypeVar

T = TypeVar('T')

Shuffler = Callable[[Sequence[T]], List[T]]


def shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """
    Return a uniformly shuffled copy of items.

    Args:
        items: Sequence to shuffle; it is never modified
        rng: Random generator to draw from, defaults to the module-level one

    Returns:
        New list holding every element of items exactly once
    """
    randint = rng.randint if rng is not None else random.randint
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def make_shuffler(seed: Optional[int] = None) -> Shuffler:
    """
    Build a shuffle function bound to its own generator.

    Args:
        seed: Seed for the generator, or None for an unseeded one

    Returns:
        Callable taking a sequence and returning a shuffled list
    """
    return partial(shuffle, rng=random.Random(seed))
