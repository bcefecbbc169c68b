import unittest

from enfa.formal_models.automaton import Automaton, OutOfRange
from enfa.lang_algorithm.simulate import accepts, epsilon_close, reachable_states

class TestSimulate(unittest.TestCase):

    def construct_automaton(self):
        # Accepts a*b, with epsilon transitions around the a-loop.
        return Automaton(
            state_count=4,
            alphabet='ab',
            start_state=0,
            accept_states=[3],
            transitions=[(1, 'a', 0), (1, 'b', 2)],
            epsilon_transitions=[(0, 1), (2, 3)]
        )

    def test_epsilon_close(self):
        M = self.construct_automaton()
        self.assertEqual(epsilon_close(M, [0]), {0, 1})
        self.assertEqual(epsilon_close(M, [0, 2]), {0, 1, 2, 3})
        self.assertEqual(epsilon_close(M, []), set())

    def test_reachable_states(self):
        M = self.construct_automaton()
        self.assertEqual(reachable_states(M, ''), {0, 1})
        self.assertEqual(reachable_states(M, 'aa'), {0, 1})
        self.assertEqual(reachable_states(M, 'ab'), {2, 3})
        self.assertEqual(reachable_states(M, 'ba'), set())

    def test_accepts(self):
        M = self.construct_automaton()
        for string in ['b', 'ab', 'aaab']:
            self.assertTrue(accepts(M, string), string)
        for string in ['', 'a', 'ba', 'abb']:
            self.assertFalse(accepts(M, string), string)

    def test_empty_string(self):
        M = Automaton(2, 'a', 0, [1], epsilon_transitions=[(0, 1)])
        self.assertTrue(accepts(M, ''))
        self.assertFalse(accepts(M, 'a'))

    def test_unknown_symbol(self):
        M = self.construct_automaton()
        with self.assertRaises(OutOfRange):
            accepts(M, 'ac')

if __name__ == '__main__':
    unittest.main()
