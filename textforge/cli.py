"""
Trains a markov chain on one or more text files and generates new text
from it, either once (--count) or interactively.
"""
import logging
import random
import sys
from pathlib import Path

import click
from tqdm import tqdm

from . import config
from .markov_chain import BalanceNotReached, ChainBuilder, EmptySource, MarkovChainError
from .render import render_tokens

PROMPT = "How many words to generate? (empty for exit)"


def train_sources(builder, paths):
    """Trains every readable, non-empty file and returns the paths that were used."""
    trained = []
    for path in tqdm(paths, desc="Training sources", unit="file", disable=len(paths) < 2):
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            try:
                builder.train(f)
            except EmptySource:
                logging.warning(f"Skipping {path}: no tokens found.")
                continue
        trained.append(path)
    return trained


def interactive_loop(forger, color):
    while True:
        line = click.prompt(PROMPT, default='', show_default=False).strip()
        if not line:
            break
        try:
            count = int(line)
        except ValueError:
            continue
        if count < 1:
            continue
        try:
            tokens = forger.generate(count)
        except BalanceNotReached as e:
            click.secho(f"Error: {e}", fg='red')
            continue
        click.echo('\n' + render_tokens(tokens, color=color) + '\n')


@click.command()
@click.argument('sources', nargs=-1, required=True,
                type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--order', '-k', type=int, default=config.MARKOV_CHAIN_ORDER, show_default=True,
              help="Number of preceding tokens forming a markov state.")
@click.option('--count', '-n', type=click.IntRange(min=1), default=None,
              help="Generate this many tokens once and exit instead of prompting.")
@click.option('--seed', type=int, default=config.RANDOM_SEED,
              help="Seed for the random source, for reproducible output.")
@click.option('--balance-factor', type=float, default=config.BALANCE_FACTOR, show_default=True,
              help="Reject output where a source's share of states reaches this multiple of its share of tokens.")
@click.option('--max-attempts', type=click.IntRange(min=1), default=config.MAX_ATTEMPTS,
              help="Give up after this many unbalanced attempts (default: retry forever).")
@click.option('--color/--no-color', default=False, help="Colour each token by the source it came from.")
@click.option('--verbose', '-v', is_flag=True, help="Log tokenizer, chain and rejection details.")
def main(sources, order, count, seed, balance_factor, max_attempts, color, verbose):
    """
    Trains a markov chain on the SOURCES text files and generates new
    text that mixes them in proportion to their size.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else config.LOG_LEVEL,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    builder = ChainBuilder(order=order)
    try:
        trained = train_sources(builder, list(sources))
        if not trained:
            click.secho("Error: None of the sources contained any tokens.", fg='red')
            sys.exit(1)

        forger = builder.finalize_and_build(rng=random.Random(seed), factor=balance_factor,
                                            max_attempts=max_attempts)

        if count is not None:
            click.echo(render_tokens(forger.generate(count), color=color))
        else:
            interactive_loop(forger, color)
    except MarkovChainError as e:
        click.secho(f"Error: {e}", fg='red')
        sys.exit(1)


if __name__ == '__main__':
    main()
