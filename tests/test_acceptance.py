import random
import unittest

from enfa.formal_models.automaton import Automaton
from enfa.formal_models.random_automaton import sample_automaton
from enfa.lang_algorithm.acceptance import propagate_acceptance
from enfa.lang_algorithm.closure import compute_closure

class TestAcceptance(unittest.TestCase):

    def test_chain(self):
        M = Automaton(3, 'a', 0, [2], epsilon_transitions=[(0, 1), (1, 2)])
        result = propagate_acceptance(M.accept_states, compute_closure(M))
        self.assertEqual(result, {0, 1, 2})

    def test_unchanged(self):
        M = Automaton(2, 'a', 0, [1], [(0, 'a', 1)], [(1, 1)])
        result = propagate_acceptance(M.accept_states, compute_closure(M))
        self.assertEqual(result, {1})

    def test_cycle(self):
        M = Automaton(2, 'a', 0, [1], [(1, 'a', 1)], [(0, 1), (1, 0)])
        result = propagate_acceptance(M.accept_states, compute_closure(M))
        self.assertEqual(result, {0, 1})

    def test_direction(self):
        # Acceptance flows backwards along epsilon edges only.
        M = Automaton(3, 'a', 0, [0], epsilon_transitions=[(0, 1), (2, 0)])
        result = propagate_acceptance(M.accept_states, compute_closure(M))
        self.assertEqual(result, {0, 2})

    def test_no_accept_states(self):
        M = Automaton(3, 'a', 0, [], epsilon_transitions=[(0, 1), (1, 2)])
        result = propagate_acceptance(M.accept_states, compute_closure(M))
        self.assertEqual(result, set())

    def test_monotonic(self):
        generator = random.Random(2024)
        for i in range(50):
            M = sample_automaton(
                generator,
                state_count=generator.randint(1, 8),
                alphabet='a',
                epsilon_prob=0.3)
            closure = compute_closure(M)
            result = propagate_acceptance(M.accept_states, closure)
            self.assertTrue(M.accept_states <= result)
            for q in M.states:
                expected = any(M.is_accept_state(r) for r in closure.closure_of(q))
                self.assertEqual(q in result, expected)

if __name__ == '__main__':
    unittest.main()
