from ..formal_models.automaton import Transition
from ..util import group_by

def rewrite_transitions(transitions, closure):
    """
    Compute the epsilon-free transition relation.

    A transition ``(s, a, d)`` is produced whenever ``s`` can reach some
    ``c`` by epsilon moves, ``c`` reads ``a`` into some ``m``, and ``m`` can
    reach ``d`` by epsilon moves. This is the relational join
    ``closure ; delta_a ; closure`` for every symbol ``a``.

    Parameters
    ----------
    transitions : iterable of enfa.formal_models.automaton.Transition
        The symbol transitions of the original automaton. Epsilon transitions
        must not be included; they are accounted for by ``closure``.
    closure : enfa.lang_algorithm.closure.EpsilonClosure

    Returns
    -------
    frozenset of enfa.formal_models.automaton.Transition
    """
    by_source = group_by(transitions, key=lambda t: t.state_from)
    result = set()
    for s in range(closure.state_count):
        for c in closure.closure_of(s):
            for t in by_source.get(c, ()):
                for d in closure.closure_of(t.state_to):
                    result.add(Transition(s, d, t.symbol))
    return frozenset(result)
