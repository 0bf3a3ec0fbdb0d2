import random
import unittest
from collections import Counter

from textforge.markov_chain import ChainBuilder, InvalidConfiguration, SequenceGenerator, UntrainedState


def build_chain(sources, order=1):
    builder = ChainBuilder(order=order)
    for source in sources:
        builder.train(source)
    return builder.finalize()


class TestSequenceGenerator(unittest.TestCase):
    def setUp(self):
        self.chain = build_chain(["the cat sat", "the dog ran"])

    def successors(self, token):
        return {str(t) for t in self.chain.states[(token,)].refs}

    def test_seed_draw_only(self):
        generator = SequenceGenerator(self.chain, rng=random.Random(1))
        for _ in range(200):
            first, second = generator.generate(2)
            self.assertIn(first, {'the', 'cat', 'dog'})
            self.assertIn(second, self.successors(first))

    def test_short_counts_return_one_seed_window(self):
        generator = SequenceGenerator(self.chain, rng=random.Random(2))
        self.assertEqual(len(generator.generate(1)), 2)

    def test_dead_ends_reseed(self):
        generator = SequenceGenerator(self.chain, rng=random.Random(3))
        for _ in range(200):
            tokens = generator.generate(10)
            self.assertEqual(len(tokens), 10)
            for current, following in zip(tokens, tokens[1:]):
                if (current,) in self.chain:
                    self.assertIn(following, self.successors(current))
                else:
                    self.assertIn(following, {'cat', 'dog', 'sat', 'ran'})

    def test_order_two(self):
        chain = build_chain(["a b c d e"], order=2)
        generator = SequenceGenerator(chain, rng=random.Random(4))
        for _ in range(50):
            tokens = generator.generate(12)
            self.assertEqual(len(tokens), 12)
            self.assertTrue(all(t in {'a', 'b', 'c', 'd', 'e'} for t in tokens))

    def test_seeding_is_uniform_over_states(self):
        chain = build_chain(["a x a x a x a x a x a x b y"])
        generator = SequenceGenerator(chain, rng=random.Random(5))
        firsts = Counter(generator.generate(2)[0] for _ in range(4000))
        # states a, b and x are drawn equally often although a and x are frequent
        for token in ('a', 'b', 'x'):
            self.assertAlmostEqual(firsts[token] / 4000, 1 / 3, delta=0.04)

    def test_seeded_generators_agree(self):
        one = SequenceGenerator(self.chain, rng=random.Random(42))
        two = SequenceGenerator(self.chain, rng=random.Random(42))
        self.assertEqual([one.generate(8) for _ in range(5)], [two.generate(8) for _ in range(5)])

    def test_invalid_count(self):
        generator = SequenceGenerator(self.chain, rng=random.Random(0))
        with self.assertRaises(InvalidConfiguration):
            generator.generate(0)

    def test_chain_without_states(self):
        chain = build_chain(["lonely"])
        with self.assertRaises(UntrainedState):
            SequenceGenerator(chain).generate(3)


if __name__ == '__main__':
    unittest.main()
