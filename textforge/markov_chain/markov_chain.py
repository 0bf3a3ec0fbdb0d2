import logging
from collections import Counter
from types import MappingProxyType

from .. import config
from .balance import BalanceFilter
from .errors import EmptySource, InvalidConfiguration, UntrainedState
from .generator import SequenceGenerator
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class TransitionTable:
    """Successor tokens of one state with their occurrence counts."""
    __slots__ = ('refs', 'ref_sum')

    def __init__(self):
        self.refs = Counter()
        self.ref_sum = 0  # only valid after finalize()

    def add(self, token):
        self.refs[token] += 1

    def finalize(self):
        # Sorted successors give the sampler a reproducible walk order.
        self.refs = dict(sorted(self.refs.items()))
        self.ref_sum = sum(self.refs.values())
        return self.ref_sum

    def items(self):
        return self.refs.items()

    def __repr__(self):
        return f"TransitionTable({dict(self.refs)!r}, ref_sum={self.ref_sum})"


class Chain:
    """
    A finalized, read-only markov chain.

    `states` maps each state key (a tuple of `order` tokens) to its
    TransitionTable; `source_counts[i]` is the number of states first
    contributed by source i.
    """

    def __init__(self, order, states, source_counts):
        self.order = order
        self.states = MappingProxyType(dict(sorted(states.items())))
        self.keys = tuple(self.states)
        self.source_counts = tuple(source_counts)

    @property
    def state_count(self):
        return len(self.states)

    @property
    def reference_count(self):
        return sum(table.ref_sum for table in self.states.values())

    def __contains__(self, key):
        return key in self.states

    def summary(self):
        counts = '/'.join(str(count) for count in self.source_counts)
        return (f"Trained with {self.state_count} states with {self.reference_count} references, "
                f"from {len(self.source_counts)} sources with {counts} states")

    def dump(self):
        """Yields one diagnostic line per state."""
        for key, table in self.states.items():
            successors = ' '.join(f"{token} ({count})" for token, count in table.items())
            yield f"{' '.join(key)}: {successors}"


class ChainBuilder:
    """
    Accumulates a markov chain of a fixed order over any number of sources.

    Every call to `train` is one source; sources are numbered from zero in
    call order. `finalize_and_build` hands the chain over to a balanced
    generator and leaves the builder empty for an unrelated session.
    """

    def __init__(self, order=None, tokenizer=None):
        self.order = config.MARKOV_CHAIN_ORDER if order is None else order
        self.tokenizer = tokenizer or Tokenizer()
        self._reset()

    def _reset(self):
        self._states = {}
        self._state_totals = []  # distinct states after each train() call

    @property
    def source_count(self):
        return len(self._state_totals)

    def train(self, stream):
        """Trains one source and returns the index assigned to it."""
        if self.order < 1:
            raise InvalidConfiguration(f"invalid markov order {self.order}")

        source = len(self._state_totals)
        tokens = self.tokenizer.tokenize(stream, source=source)
        if not tokens:
            raise EmptySource(f"source {source} contains no tokens")

        # shift a window of size=order+1 over the list of tokens
        for start in range(len(tokens) - self.order):
            key = tuple(tokens[start:start + self.order])
            table = self._states.get(key)
            if table is None:
                table = self._states[key] = TransitionTable()
            table.add(tokens[start + self.order])

        self._state_totals.append(len(self._states))
        return source

    def finalize(self):
        """Returns the trained Chain and resets the builder."""
        if not self._state_totals:
            raise UntrainedState("untrained")

        for table in self._states.values():
            table.finalize()

        totals = self._state_totals
        source_counts = [totals[0]] + [rhs - lhs for lhs, rhs in zip(totals, totals[1:])]
        chain = Chain(self.order, self._states, source_counts)
        self._reset()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Trained markov process:")
            for line in chain.dump():
                logger.debug(f" {line}")
        logger.info(chain.summary())
        return chain

    def finalize_and_build(self, rng=None, factor=None, max_attempts=None):
        """Finalizes the chain and wraps it in a balanced generator."""
        chain = self.finalize()
        generator = SequenceGenerator(chain, rng=rng)
        if max_attempts is None:
            max_attempts = config.MAX_ATTEMPTS
        return BalanceFilter(generator, chain.source_counts, chain.state_count,
                             factor=factor, max_attempts=max_attempts)
