from ..util import group_by

EPSILON_DOT_LABEL = '&epsilon;'

def print_automaton_as_dot(automaton, fout):
    alphabet = automaton.alphabet
    fout.write('digraph {\n')
    fout.write('\trankdir=LR;\n')
    fout.write('\tnode [shape=circle];\n')
    fout.write('\tqstart [label="",shape=none];\n')
    for state in automaton.states:
        if automaton.is_accept_state(state):
            shape = 'doublecircle'
        else:
            shape = 'circle'
        fout.write('\tq%d [label="%d",shape=%s];\n' % (state, state, shape))
    fout.write('\tqstart -> q%d;\n' % automaton.start_state)
    # One edge per pair of states, with all of its labels joined.
    edges = group_by(
        automaton.epsilon_transitions | automaton.transitions,
        key=lambda t: (t.state_from, t.state_to))
    for (state_from, state_to), transitions in sorted(edges.items()):
        labels = [
            transition_dot_label(t)
            for t in sorted(transitions, key=lambda t: symbol_order(alphabet, t))
        ]
        fout.write('\tq%d -> q%d [label="%s"];\n' % (
            state_from, state_to, ','.join(labels)))
    fout.write('}\n')

def symbol_order(alphabet, transition):
    if transition.is_epsilon:
        return -1
    else:
        return alphabet.index(transition.symbol)

def transition_dot_label(transition):
    if transition.is_epsilon:
        return EPSILON_DOT_LABEL
    else:
        return dot_escape(transition.symbol)

def dot_escape(s):
    return s.replace('\\', '\\\\').replace('"', '\\"')
