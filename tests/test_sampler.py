import random
import unittest

from textforge.markov_chain import SamplingInvariantViolated, Token, TransitionTable, WeightedSampler


class TestWeightedSampler(unittest.TestCase):
    def test_ratio_follows_counts(self):
        table = TransitionTable()
        for token in ['A', 'A', 'A', 'B']:
            table.add(Token(token))
        table.finalize()

        sampler = WeightedSampler(random.Random(1234))
        draws = [sampler.sample(table) for _ in range(10000)]
        share_a = draws.count('A') / len(draws)
        self.assertAlmostEqual(share_a, 0.75, delta=0.05 * 0.75)

    def test_single_entry(self):
        sampler = WeightedSampler(random.Random(0))
        self.assertEqual(sampler.choose([('only', 5)], 5), 'only')

    def test_walk_order_and_cdf(self):
        class FixedRandom:
            def __init__(self, value):
                self.value = value

            def randrange(self, stop):
                return self.value

        pairs = [('a', 2), ('b', 3), ('c', 1)]
        picks = [WeightedSampler(FixedRandom(r)).choose(pairs, 6) for r in range(6)]
        self.assertEqual(picks, ['a', 'a', 'b', 'b', 'b', 'c'])

    def test_inconsistent_sum_is_fatal(self):
        sampler = WeightedSampler(random.Random(0))
        with self.assertRaises(SamplingInvariantViolated):
            for _ in range(100):
                sampler.choose([('a', 1)], 50)
        with self.assertRaises(SamplingInvariantViolated):
            sampler.choose([], 0)

    def test_seeded_draws_are_reproducible(self):
        pairs = [('x', 1), ('y', 4), ('z', 2)]
        sampler_a = WeightedSampler(random.Random(7))
        sampler_b = WeightedSampler(random.Random(7))
        self.assertEqual([sampler_a.choose(pairs, 7) for _ in range(50)],
                         [sampler_b.choose(pairs, 7) for _ in range(50)])


if __name__ == '__main__':
    unittest.main()
