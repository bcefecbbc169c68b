from .automaton import Alphabet, Automaton

def sample_automaton(generator, state_count, alphabet, transition_prob=0.2,
        epsilon_prob=0.1, accept_prob=0.25, allow_epsilon_loops=True):
    """
    Sample a random epsilon-NFA.

    Every possible symbol transition, epsilon transition, and accept state is
    included independently with the given probability.

    Parameters
    ----------
    generator : random.Random
    state_count : int
    alphabet : enfa.formal_models.automaton.Alphabet or iterable of str
    allow_epsilon_loops : bool
        Whether epsilon transitions from a state to itself may be sampled.

    Returns
    -------
    enfa.formal_models.automaton.Automaton
    """
    alphabet = Alphabet(alphabet)
    states = range(state_count)
    transitions = [
        (p, a, q)
        for p in states
        for a in alphabet
        for q in states
        if generator.random() < transition_prob
    ]
    epsilon_transitions = [
        (p, q)
        for p in states
        for q in states
        if (allow_epsilon_loops or p != q) and generator.random() < epsilon_prob
    ]
    accept_states = [q for q in states if generator.random() < accept_prob]
    return Automaton(
        state_count=state_count,
        alphabet=alphabet,
        start_state=generator.randrange(state_count),
        accept_states=accept_states,
        transitions=transitions,
        epsilon_transitions=epsilon_transitions
    )

def sample_string(generator, alphabet, length):
    symbols = list(Alphabet(alphabet))
    return ''.join(generator.choice(symbols) for i in range(length))
