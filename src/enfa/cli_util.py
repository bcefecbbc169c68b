import argparse
import contextlib
import sys

from .formal_models.automaton import Alphabet, InvalidAlphabet

def parse_probability(s):
    value = float(s)
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError(f'probability must be in [0, 1], got {s}')
    return value

def parse_alphabet(s):
    try:
        return Alphabet(s)
    except InvalidAlphabet as e:
        raise argparse.ArgumentTypeError(str(e))

@contextlib.contextmanager
def open_input(path):
    if path is None:
        yield sys.stdin
    else:
        with path.open(encoding='utf-8') as fin:
            yield fin

@contextlib.contextmanager
def open_output(path):
    if path is None:
        yield sys.stdout
    else:
        with path.open('w', encoding='utf-8') as fout:
            yield fout
