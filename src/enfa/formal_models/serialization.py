import json
import re

from .automaton import Automaton

class AutomatonFormatError(ValueError):
    pass

def automaton_to_json(automaton):
    alphabet = automaton.alphabet
    def symbol_order(t):
        return (t.state_from, alphabet.index(t.symbol), t.state_to)
    return {
        'states' : automaton.state_count,
        'alphabet' : list(alphabet),
        'start' : automaton.start_state,
        'accepts' : sorted(automaton.accept_states),
        'transitions' : [
            { 'from' : t.state_from, 'symbol' : t.symbol, 'to' : t.state_to }
            for t in sorted(automaton.transitions, key=symbol_order)
        ],
        'epsilon_transitions' : [
            { 'from' : t.state_from, 'to' : t.state_to }
            for t in sorted(automaton.epsilon_transitions)
        ]
    }

def automaton_from_json(obj):
    try:
        return Automaton(
            state_count=obj['states'],
            alphabet=obj['alphabet'],
            start_state=obj['start'],
            accept_states=obj.get('accepts', ()),
            transitions=[
                (t['from'], t['symbol'], t['to'])
                for t in obj.get('transitions', ())
            ],
            epsilon_transitions=[
                (t['from'], t['to'])
                for t in obj.get('epsilon_transitions', ())
            ]
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise AutomatonFormatError(f'malformed automaton description: {e!r}')

def load(fin):
    try:
        obj = json.load(fin)
    except json.JSONDecodeError as e:
        raise AutomatonFormatError(f'invalid JSON: {e}')
    return automaton_from_json(obj)

def dump(automaton, fout):
    json.dump(automaton_to_json(automaton), fout, ensure_ascii=False, indent=2)
    fout.write('\n')

class _Scanner:
    """
    Reads integers and single characters from text the way ``scanf`` does
    with ``"%d"`` and ``" %c"``.
    """

    INT_RE = re.compile(r'\s*([-+]?\d+)')
    CHAR_RE = re.compile(r'\s*(\S)')

    def __init__(self, text):
        self.text = text
        self.pos = 0

    def _match(self, regex, description):
        m = regex.match(self.text, self.pos)
        if m is None:
            rest = self.text[self.pos:].strip()
            if rest:
                raise AutomatonFormatError(
                    f'expected {description}, got {rest.split()[0]!r}')
            else:
                raise AutomatonFormatError(
                    f'expected {description}, got end of input')
        self.pos = m.end()
        return m.group(1)

    def next_int(self, description='an integer'):
        return int(self._match(self.INT_RE, description))

    def next_char(self, description='a symbol'):
        return self._match(self.CHAR_RE, description)

STOP = -1

def read_prompt_format(fin):
    """
    Read an automaton from the token format used by the interactive
    converter:

    .. code-block:: text

        <state count> <symbol count> <symbols...>
        <start state>
        <final state count> <final states...>
        <src> <symbol> <dest>   (repeated, ended by -1)
        <src> <dest>            (repeated, ended by -1)

    The ``-1`` terminators are part of this format only and never reach the
    automaton.
    """
    scanner = _Scanner(fin.read())
    state_count = scanner.next_int('the number of states')
    symbol_count = scanner.next_int('the number of symbols')
    if symbol_count < 1:
        raise AutomatonFormatError(
            f'the number of symbols must be positive, got {symbol_count}')
    symbols = [scanner.next_char('an alphabet symbol') for i in range(symbol_count)]
    start_state = scanner.next_int('the initial state')
    final_count = scanner.next_int('the number of final states')
    if final_count < 0:
        raise AutomatonFormatError(
            f'the number of final states must not be negative, got {final_count}')
    accept_states = [scanner.next_int('a final state') for i in range(final_count)]
    transitions = []
    while True:
        src = scanner.next_int('a transition source or -1')
        if src == STOP:
            break
        symbol = scanner.next_char('a transition symbol')
        dest = scanner.next_int('a transition destination')
        transitions.append((src, symbol, dest))
    epsilon_transitions = []
    while True:
        src = scanner.next_int('an epsilon transition source or -1')
        if src == STOP:
            break
        dest = scanner.next_int('an epsilon transition destination')
        epsilon_transitions.append((src, dest))
    return Automaton(
        state_count=state_count,
        alphabet=symbols,
        start_state=start_state,
        accept_states=accept_states,
        transitions=transitions,
        epsilon_transitions=epsilon_transitions
    )

def write_prompt_format(automaton, fout):
    alphabet = automaton.alphabet
    fout.write('%d %d %s\n' % (
        automaton.state_count, len(alphabet), ' '.join(alphabet)))
    fout.write('%d\n' % automaton.start_state)
    accept_states = sorted(automaton.accept_states)
    fout.write(' '.join(map(str, [len(accept_states)] + accept_states)))
    fout.write('\n')
    for t in sorted(automaton.transitions):
        fout.write('%d %s %d\n' % (t.state_from, t.symbol, t.state_to))
    fout.write('%d\n' % STOP)
    for t in sorted(automaton.epsilon_transitions):
        fout.write('%d %d\n' % (t.state_from, t.state_to))
    fout.write('%d\n' % STOP)

def write_automaton_text(automaton, fout, title=None):
    alphabet = automaton.alphabet
    if title is not None:
        fout.write(f'===== {title} =====\n')
    fout.write(f'Start state: {automaton.start_state}\n')
    fout.write('Final states: %s\n' % ' '.join(
        map(str, sorted(automaton.accept_states))))
    fout.write('Transitions:\n')
    for t in sorted(automaton.epsilon_transitions):
        fout.write(f'{t}\n')
    ordered = sorted(
        automaton.transitions,
        key=lambda t: (t.state_from, alphabet.index(t.symbol), t.state_to))
    for t in ordered:
        fout.write(f'{t}\n')

def write_closure_text(closure, fout):
    fout.write('Epsilon closures:\n')
    for i, row in enumerate(closure.rows):
        fout.write('%d: {%s}\n' % (i, ', '.join(map(str, sorted(row)))))
