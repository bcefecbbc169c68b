from ..util import dfs

def epsilon_close(automaton, states):
    result = set()
    for state in states:
        if state not in result:
            result.update(dfs(state, automaton.epsilon_successors))
    return frozenset(result)

def step(automaton, states, symbol):
    """
    Read one symbol from a set of (already epsilon-closed) states and return
    the epsilon-closed set of states that follows.
    """
    automaton.alphabet.index(symbol)
    next_states = set()
    for state in states:
        next_states.update(automaton.transitions_from(state, symbol))
    return epsilon_close(automaton, next_states)

def reachable_states(automaton, string):
    """
    Return the set of states the automaton can be in after reading a string.

    Epsilon transitions are followed before the first symbol and after every
    symbol, so this works both for epsilon-NFAs and for epsilon-free NFAs.

    Raises
    ------
    enfa.formal_models.automaton.OutOfRange
        If the string contains a symbol that is not in the alphabet.
    """
    states = epsilon_close(automaton, (automaton.start_state,))
    for symbol in string:
        states = step(automaton, states, symbol)
    return states

def accepts(automaton, string):
    return not automaton.accept_states.isdisjoint(
        reachable_states(automaton, string))
