import attr

from ..logging import NullLogger
from .acceptance import propagate_acceptance
from .closure import compute_closure
from .rewrite import rewrite_transitions

@attr.s(frozen=True)
class ConversionResult:
    automaton = attr.ib()
    closure = attr.ib()

def remove_epsilon_transitions_with_closure(automaton, closure_method='search',
        logger=None):
    """
    Convert an epsilon-NFA into an equivalent NFA without epsilon transitions.

    Parameters
    ----------
    automaton : enfa.formal_models.automaton.Automaton
    closure_method : str
        Name of the algorithm used to compute the epsilon-closure. See
        :func:`enfa.lang_algorithm.closure.compute_closure`.
    logger : enfa.logging.Logger, optional
        Receives one event per step of the conversion.

    Returns
    -------
    ConversionResult
        The converted automaton together with the epsilon-closure that was
        used to build it. The input automaton is not modified.
    """
    if logger is None:
        logger = NullLogger()
    closure = compute_closure(automaton, closure_method)
    logger.log('closure', {
        'method' : closure_method,
        'states' : automaton.state_count,
        'epsilon_transitions' : len(automaton.epsilon_transitions),
        'pairs' : len(closure)
    })
    transitions = rewrite_transitions(automaton.transitions, closure)
    logger.log('rewrite', {
        'input_transitions' : len(automaton.transitions),
        'output_transitions' : len(transitions)
    })
    accept_states = propagate_acceptance(automaton.accept_states, closure)
    logger.log('acceptance', {
        'input_accept_states' : sorted(automaton.accept_states),
        'output_accept_states' : sorted(accept_states)
    })
    result = automaton.replaced(
        accept_states=accept_states,
        transitions=transitions,
        epsilon_transitions=()
    )
    logger.log('conversion', {
        'states' : result.state_count,
        'symbols' : result.symbol_count,
        'transitions' : len(result.transitions),
        'accept_states' : len(result.accept_states)
    })
    return ConversionResult(result, closure)

def remove_epsilon_transitions(automaton, closure_method='search', logger=None):
    """
    Like :func:`remove_epsilon_transitions_with_closure`, but only return the
    converted automaton.
    """
    return remove_epsilon_transitions_with_closure(
        automaton, closure_method, logger).automaton
