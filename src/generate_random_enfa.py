import argparse
import logging
import pathlib
import random

from enfa.cli_util import open_output, parse_alphabet, parse_probability
from enfa.formal_models.random_automaton import sample_automaton
from enfa.formal_models.serialization import dump

def main():

    logger = logging.getLogger('main')
    logger.addHandler(logging.StreamHandler())
    logger.setLevel(logging.INFO)

    parser = argparse.ArgumentParser(
        description=
        'Sample a random epsilon-NFA and write it in JSON format. Useful '
        'for generating inputs to convert_enfa.'
    )
    parser.add_argument('--states', type=int, required=True,
        help='Number of states.')
    parser.add_argument('--alphabet', type=parse_alphabet, default='ab',
        help='The alphabet symbols, written as one string, e.g. "abc".')
    parser.add_argument('--transition-prob', type=parse_probability, default=0.2,
        help='Probability that each possible symbol transition is included.')
    parser.add_argument('--epsilon-prob', type=parse_probability, default=0.1,
        help='Probability that each possible epsilon transition is included.')
    parser.add_argument('--accept-prob', type=parse_probability, default=0.25,
        help='Probability that each state is an accept state.')
    parser.add_argument('--seed', type=int,
        help='Random seed.')
    parser.add_argument('--output', type=pathlib.Path,
        help='Output file. Defaults to stdout.')
    args = parser.parse_args()

    if args.states < 1:
        parser.error('--states must be positive')

    generator = random.Random(args.seed)
    automaton = sample_automaton(
        generator,
        args.states,
        args.alphabet,
        transition_prob=args.transition_prob,
        epsilon_prob=args.epsilon_prob,
        accept_prob=args.accept_prob
    )
    logger.info(
        f'sampled {len(automaton.transitions)} symbol and '
        f'{len(automaton.epsilon_transitions)} epsilon transitions')
    with open_output(args.output) as fout:
        dump(automaton, fout)

if __name__ == '__main__':
    main()
