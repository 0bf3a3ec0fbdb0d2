import logging

from .. import config
from .errors import BalanceNotReached, InvalidConfiguration

logger = logging.getLogger(__name__)


class BalanceFilter:
    """
    Regenerates sequences until no source is starved.

    A source is starved when its share of the trained states reaches
    `factor` times its share of the generated tokens. Sources that are
    overrepresented in the output never cause a rejection.

    With `max_attempts` left as None the filter retries without bound.
    """

    def __init__(self, generator, source_counts, state_count, factor=None, max_attempts=None):
        if factor is None:
            factor = config.BALANCE_FACTOR
        if factor <= 0:
            raise InvalidConfiguration(f"balance factor must be positive, got {factor}")
        if max_attempts is not None and max_attempts < 1:
            raise InvalidConfiguration(f"max_attempts must be at least 1, got {max_attempts}")

        self.generator = generator
        self.source_counts = tuple(source_counts)
        self.state_count = state_count
        self.factor = factor
        self.max_attempts = max_attempts

    def generate(self, count):
        attempts = 0
        while True:
            attempts += 1
            tokens = self.generator.generate(count)
            if self.is_balanced(tokens):
                return tokens

            logger.debug(f"Rejecting attempt {attempts}: {' '.join(tokens)}")
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise BalanceNotReached(
                    f"no balanced sequence of {count} tokens after {attempts} attempts")

    def is_balanced(self, tokens):
        token_counts = [0] * len(self.source_counts)
        for token in tokens:
            token_counts[token.source] += 1

        for source, source_states in enumerate(self.source_counts):
            source_ratio = source_states / self.state_count
            token_ratio = token_counts[source] / len(tokens)
            if not self.ratios_balanced(source_ratio, token_ratio, self.factor):
                return False
        return True

    @staticmethod
    def ratios_balanced(source_ratio, token_ratio, factor=2.0):
        return source_ratio < token_ratio * factor
