class MarkovChainError(Exception):
    """Base class for all errors raised by the markov chain core."""


class InvalidConfiguration(MarkovChainError, ValueError):
    pass


class UntrainedState(MarkovChainError, RuntimeError):
    pass


class EmptySource(MarkovChainError, ValueError):
    pass


class SamplingInvariantViolated(MarkovChainError, AssertionError):
    """The cached reference sum of a transition table disagrees with its counts."""


class BalanceNotReached(MarkovChainError, RuntimeError):
    """No balanced sequence was found within the configured number of attempts."""
