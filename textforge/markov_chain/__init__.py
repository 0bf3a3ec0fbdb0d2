from .balance import BalanceFilter
from .errors import (
    BalanceNotReached,
    EmptySource,
    InvalidConfiguration,
    MarkovChainError,
    SamplingInvariantViolated,
    UntrainedState,
)
from .generator import SequenceGenerator
from .markov_chain import Chain, ChainBuilder, TransitionTable
from .sampler import WeightedSampler
from .tokenizer import CharClass, Token, Tokenizer, classify, tokenize
