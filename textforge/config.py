import logging
import os

# --- Chain Configuration ---
# Each value can be overridden through a TEXTFORGE_* environment variable.
# Command-line options take precedence over both.


def _env(name, cast, default):
    value = os.environ.get(name)
    if value is None or value.strip() == '':
        return default
    try:
        return cast(value)
    except ValueError:
        print(f"Warning: Could not parse {name}={value!r}. Using the default of {default!r}.")
        return default


def _log_level(value):
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(value)
    return level


MARKOV_CHAIN_ORDER = _env('TEXTFORGE_ORDER', int, 2)  # Number of preceding tokens forming a state

# A source is considered starved when its share of trained states reaches
# BALANCE_FACTOR times its share of generated tokens.
BALANCE_FACTOR = _env('TEXTFORGE_BALANCE_FACTOR', float, 2.0)

# Upper bound for regenerating unbalanced sequences. None retries forever.
MAX_ATTEMPTS = _env('TEXTFORGE_MAX_ATTEMPTS', int, None)

# --- Runtime Configuration ---
RANDOM_SEED = _env('TEXTFORGE_SEED', int, None)
LOG_LEVEL = _env('TEXTFORGE_LOG_LEVEL', _log_level, 'INFO')
