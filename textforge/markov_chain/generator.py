import random

from .errors import InvalidConfiguration, UntrainedState
from .sampler import WeightedSampler


class SequenceGenerator:
    """
    Produces token sequences by walking a finalized Chain.

    Every instance owns its random source. Pass a seeded
    `random.Random` to get reproducible output.
    """

    def __init__(self, chain, rng=None):
        self.chain = chain
        self.rng = rng if rng is not None else random.Random()
        self.sampler = WeightedSampler(self.rng)

    def generate(self, count):
        """
        Returns a list of `count` tokens.

        The first draw always yields order+1 tokens, so smaller counts
        still return one full seed window.
        """
        if count < 1:
            raise InvalidConfiguration(f"token count must be positive, got {count}")
        if not self.chain.keys:
            raise UntrainedState("the trained chain holds no states")

        # initially add order+1 tokens
        window = self._seed()
        tokens = list(window)

        # subsequently add only the follow-up token
        while len(tokens) < count:
            window = self._step(window)
            tokens.append(window[-1])

        return tokens

    def _seed(self):
        # uniform over states, not over their frequency
        key = self.chain.keys[self.rng.randrange(len(self.chain.keys))]
        return key + (self.sampler.sample(self.chain.states[key]),)

    def _step(self, window):
        key = window[1:]
        table = self.chain.states.get(key)
        if table is None:
            # end of a training source, start again fresh
            return self._seed()
        return key + (self.sampler.sample(table),)
