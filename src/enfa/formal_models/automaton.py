class OutOfRange(ValueError):
    pass

class InvalidAlphabet(ValueError):
    pass

class EpsilonType:

    def __str__(self):
        return 'ε'

    def __repr__(self):
        return 'EPSILON'

EPSILON = EpsilonType()

class Alphabet:
    """
    An ordered set of distinct single-character input symbols.
    """

    def __init__(self, symbols):
        if isinstance(symbols, Alphabet):
            symbols = symbols.symbols
        elif not isinstance(symbols, tuple):
            symbols = tuple(symbols)
        if not symbols:
            raise InvalidAlphabet('alphabet must contain at least one symbol')
        index = {}
        for i, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidAlphabet(
                    'alphabet symbols must be single characters, got %r' % (symbol,))
            if symbol.isspace():
                raise InvalidAlphabet('alphabet symbols must not be whitespace')
            if symbol == str(EPSILON):
                raise InvalidAlphabet(
                    '%s is reserved for epsilon transitions' % (symbol,))
            if symbol in index:
                raise InvalidAlphabet('duplicate alphabet symbol %r' % (symbol,))
            index[symbol] = i
        self.symbols = symbols
        self._index = index

    def index(self, symbol):
        try:
            return self._index[symbol]
        except (KeyError, TypeError):
            raise OutOfRange('symbol %r is not in the alphabet %s' % (symbol, self))

    def value(self, i):
        if 0 <= i < len(self.symbols):
            return self.symbols[i]
        else:
            raise OutOfRange('symbol index %d is out of range' % i)

    def __contains__(self, symbol):
        return symbol in self._index

    def __iter__(self):
        return iter(self.symbols)

    def __len__(self):
        return len(self.symbols)

    def __eq__(self, other):
        return type(self) == type(other) and self.symbols == other.symbols

    def __hash__(self):
        return hash(self.symbols)

    def __str__(self):
        return '{%s}' % ', '.join(self.symbols)

    def __repr__(self):
        return 'Alphabet(%r)' % (self.symbols,)

class Transition:

    def __init__(self, state_from, state_to, symbol=EPSILON):
        self.state_from = state_from
        self.state_to = state_to
        self.symbol = symbol

    @property
    def is_epsilon(self):
        return self.symbol == EPSILON

    def key(self):
        return (self.state_from, self.symbol, self.state_to)

    def _sort_key(self):
        # EPSILON does not compare with strings, so epsilon edges sort first.
        if self.is_epsilon:
            return (self.state_from, 0, '', self.state_to)
        else:
            return (self.state_from, 1, self.symbol, self.state_to)

    def __eq__(self, other):
        return type(self) == type(other) and self.key() == other.key()

    def __hash__(self):
        return hash(self.key())

    def __lt__(self, other):
        if type(self) != type(other):
            raise TypeError
        return self._sort_key() < other._sort_key()

    def __str__(self):
        return '%s --%s--> %s' % (self.state_from, self.symbol, self.state_to)

    def __repr__(self):
        return 'Transition(state_from=%r, state_to=%r, symbol=%r)' % (
            self.state_from, self.state_to, self.symbol)

class Automaton:
    """
    A nondeterministic finite automaton over the states
    ``0, ..., state_count - 1`` which may contain epsilon transitions.

    Parameters
    ----------
    state_count : int
    alphabet : Alphabet or iterable of str
    start_state : int
    accept_states : iterable of int
    transitions : iterable
        Symbol transitions, either as :class:`Transition` objects or as
        ``(state_from, symbol, state_to)`` triples. A :class:`Transition`
        whose symbol is :data:`EPSILON` is treated as an epsilon transition.
    epsilon_transitions : iterable
        Epsilon transitions, either as :class:`Transition` objects or as
        ``(state_from, state_to)`` pairs.

    Raises
    ------
    OutOfRange
        If a state id is not in ``[0, state_count)`` or a transition symbol
        is not in the alphabet.
    InvalidAlphabet
        If the alphabet is empty, contains duplicates, or contains a
        whitespace or epsilon symbol.
    """

    def __init__(self, state_count, alphabet, start_state, accept_states,
            transitions=(), epsilon_transitions=()):
        if not isinstance(state_count, int) or isinstance(state_count, bool):
            raise TypeError('state count must be an int')
        if state_count < 1:
            raise OutOfRange('state count must be positive, got %d' % state_count)
        self.state_count = state_count
        self.alphabet = Alphabet(alphabet)
        self.start_state = self._check_state(start_state, 'start state')
        self.accept_states = frozenset(
            self._check_state(q, 'accept state') for q in accept_states)
        symbol_transitions = set()
        epsilon_set = set()
        for t in transitions:
            t = self._to_transition(t)
            if t.is_epsilon:
                epsilon_set.add(t)
            else:
                symbol_transitions.add(t)
        for t in epsilon_transitions:
            if not isinstance(t, Transition):
                state_from, state_to = t
                t = Transition(state_from, state_to)
            elif not t.is_epsilon:
                raise OutOfRange(
                    'epsilon transition %s has a non-epsilon symbol' % (t,))
            epsilon_set.add(self._check_transition(t))
        self.transitions = frozenset(symbol_transitions)
        self.epsilon_transitions = frozenset(epsilon_set)
        successors = {}
        for t in self.transitions:
            successors.setdefault((t.state_from, t.symbol), set()).add(t.state_to)
        self._successors = {
            k : frozenset(v) for k, v in successors.items() }
        epsilon_successors = {}
        for t in self.epsilon_transitions:
            epsilon_successors.setdefault(t.state_from, set()).add(t.state_to)
        self._epsilon_successors = {
            k : frozenset(v) for k, v in epsilon_successors.items() }

    def _check_state(self, state, description='state'):
        if not isinstance(state, int) or isinstance(state, bool):
            raise TypeError('%s must be an int, got %r' % (description, state))
        if not 0 <= state < self.state_count:
            raise OutOfRange('%s %d is out of range [0, %d)' % (
                description, state, self.state_count))
        return state

    def _check_transition(self, t):
        self._check_state(t.state_from, 'transition source')
        self._check_state(t.state_to, 'transition destination')
        if not t.is_epsilon:
            self.alphabet.index(t.symbol)
        return t

    def _to_transition(self, t):
        if not isinstance(t, Transition):
            state_from, symbol, state_to = t
            t = Transition(state_from, state_to, symbol)
        return self._check_transition(t)

    @property
    def symbol_count(self):
        return len(self.alphabet)

    @property
    def states(self):
        return range(self.state_count)

    def is_accept_state(self, state):
        return state in self.accept_states

    @property
    def has_epsilon_transitions(self):
        return bool(self.epsilon_transitions)

    def transitions_from(self, state, symbol):
        return self._successors.get((state, symbol), frozenset())

    def epsilon_successors(self, state):
        return self._epsilon_successors.get(state, frozenset())

    def replaced(self, **kwargs):
        _kwargs = self._get_kwargs()
        _kwargs.update(kwargs)
        return type(self)(**_kwargs)

    def _get_kwargs(self):
        return dict(
            state_count=self.state_count,
            alphabet=self.alphabet,
            start_state=self.start_state,
            accept_states=self.accept_states,
            transitions=self.transitions,
            epsilon_transitions=self.epsilon_transitions
        )

    def _key(self):
        return (
            self.state_count, self.alphabet, self.start_state,
            self.accept_states, self.transitions, self.epsilon_transitions
        )

    def __eq__(self, other):
        return type(self) == type(other) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return '''\
states: %d
alphabet: %s
start state: %s
accept states: %s
transitions:
%s''' % (
            self.state_count,
            self.alphabet,
            self.start_state,
            sorted(self.accept_states),
            '\n'.join(map(str, sorted(self.epsilon_transitions | self.transitions)))
        )

    def __repr__(self):
        return 'Automaton(%r, %r, %r, %r, %r, %r)' % (
            self.state_count, self.alphabet, self.start_state,
            sorted(self.accept_states), sorted(self.transitions),
            sorted(self.epsilon_transitions))
