import random

from .errors import SamplingInvariantViolated


class WeightedSampler:
    """
    Draws one item from (item, count) pairs with probability proportional
    to its count.

    The pairs are walked in the order they are given, so with a seeded
    random source the draws are reproducible.
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else random.Random()

    def choose(self, pairs, ref_sum):
        if ref_sum < 1:
            raise SamplingInvariantViolated(f"cannot sample from a reference sum of {ref_sum}")
        index = self.rng.randrange(ref_sum)

        # Cumulative distribution over the counts
        cdf = 0
        for item, count in pairs:
            cdf += count
            if index < cdf:
                return item

        raise SamplingInvariantViolated(f"unexpected random {index} of {ref_sum}")

    def sample(self, table):
        """Draws a successor from a finalized TransitionTable."""
        return self.choose(table.items(), table.ref_sum)
