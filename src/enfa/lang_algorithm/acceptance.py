def propagate_acceptance(accept_states, closure):
    """
    Return the set of states whose epsilon-closure contains an accept state.

    Since every state is in its own closure, the result is always a superset
    of ``accept_states``.
    """
    accept_states = frozenset(accept_states)
    return frozenset(
        i for i in range(closure.state_count)
        if not accept_states.isdisjoint(closure.closure_of(i))
    )
