import attr
import torch

from ..util import dfs

class UnknownClosureMethod(ValueError):
    pass

@attr.s(frozen=True)
class EpsilonClosure:
    """
    The reflexive-transitive closure of an automaton's epsilon relation.

    ``rows[i]`` is the set of states reachable from state ``i`` using zero or
    more epsilon transitions.
    """
    rows = attr.ib(converter=lambda rows: tuple(frozenset(r) for r in rows))

    @classmethod
    def identity(cls, state_count):
        return cls(frozenset((i,)) for i in range(state_count))

    @classmethod
    def from_matrix(cls, matrix):
        if matrix.dim() != 2 or matrix.size(0) != matrix.size(1):
            raise ValueError('closure matrix must be square, got size %s' % (
                tuple(matrix.size()),))
        return cls(
            torch.nonzero(row, as_tuple=False).flatten().tolist()
            for row in matrix.to(torch.bool)
        )

    @property
    def state_count(self):
        return len(self.rows)

    def closure_of(self, state):
        return self.rows[state]

    def closure_of_set(self, states):
        result = set()
        for state in states:
            result.update(self.rows[state])
        return frozenset(result)

    def pairs(self):
        for i, row in enumerate(self.rows):
            for j in sorted(row):
                yield i, j

    def to_matrix(self, device=None):
        n = self.state_count
        matrix = torch.zeros(n, n, dtype=torch.bool, device=device)
        for i, j in self.pairs():
            matrix[i, j] = True
        return matrix

    def __contains__(self, pair):
        i, j = pair
        return 0 <= i < len(self.rows) and j in self.rows[i]

    def __len__(self):
        return sum(len(row) for row in self.rows)

def fixpoint_closure(automaton):
    """
    Start from the identity relation and keep extending every row by one
    epsilon step until a full pass adds nothing new.
    """
    rows = [{ i } for i in automaton.states]
    changed = True
    while changed:
        changed = False
        for row in rows:
            for j in list(row):
                for k in automaton.epsilon_successors(j):
                    if k not in row:
                        row.add(k)
                        changed = True
    return EpsilonClosure(rows)

def search_closure(automaton):
    return EpsilonClosure(
        dfs(i, automaton.epsilon_successors)
        for i in automaton.states
    )

def epsilon_matrix(automaton, device=None):
    n = automaton.state_count
    matrix = torch.zeros(n, n, dtype=torch.bool, device=device)
    for t in automaton.epsilon_transitions:
        matrix[t.state_from, t.state_to] = True
    return matrix

def matrix_closure(automaton, device=None):
    # Repeated squaring of (I + E) converges after O(log n) products.
    closure = epsilon_matrix(automaton, device)
    closure |= torch.eye(automaton.state_count, dtype=torch.bool, device=device)
    while True:
        as_float = closure.to(torch.float32)
        squared = torch.matmul(as_float, as_float) > 0
        if torch.equal(squared, closure):
            break
        closure = squared
    return EpsilonClosure.from_matrix(closure)

CLOSURE_METHODS = {
    'search' : search_closure,
    'fixpoint' : fixpoint_closure,
    'matrix' : matrix_closure
}

def compute_closure(automaton, method='search'):
    """
    Compute the epsilon-closure of every state of an automaton.

    Parameters
    ----------
    automaton : enfa.formal_models.automaton.Automaton
    method : str
        One of ``'search'``, ``'fixpoint'``, or ``'matrix'``. All methods
        produce the same relation.

    Returns
    -------
    EpsilonClosure
    """
    try:
        func = CLOSURE_METHODS[method]
    except KeyError:
        raise UnknownClosureMethod(
            'unknown closure method %r; expected one of %s' % (
                method, ', '.join(CLOSURE_METHODS)))
    return func(automaton)
