import argparse
import contextlib
import logging
import pathlib
import sys

from enfa.cli_util import open_input, open_output
from enfa.formal_models.automaton import OutOfRange
from enfa.formal_models.serialization import (
    load, dump, read_prompt_format, write_automaton_text, write_closure_text,
    write_prompt_format)
from enfa.lang_algorithm.closure import CLOSURE_METHODS
from enfa.lang_algorithm.conversion import remove_epsilon_transitions_with_closure
from enfa.lang_algorithm.dot import print_automaton_as_dot
from enfa.lang_algorithm.simulate import accepts
from enfa.logging import FileLogger, NullLogger

READERS = {
    'json' : load,
    'prompt' : read_prompt_format
}

def write_output(output_format, automaton, closure, show_closure, fout):
    if output_format == 'json':
        dump(automaton, fout)
    elif output_format == 'prompt':
        write_prompt_format(automaton, fout)
    elif output_format == 'dot':
        print_automaton_as_dot(automaton, fout)
    else:
        if show_closure:
            write_closure_text(closure, fout)
        write_automaton_text(automaton, fout, title='ε-free NFA')

def main():

    logger = logging.getLogger('main')
    logger.addHandler(logging.StreamHandler())
    logger.setLevel(logging.INFO)

    parser = argparse.ArgumentParser(
        description=
        'Convert a nondeterministic finite automaton with epsilon '
        'transitions into an equivalent one without epsilon transitions.'
    )
    parser.add_argument('--input', type=pathlib.Path,
        help='File containing the automaton. Defaults to stdin.')
    parser.add_argument('--input-format', choices=sorted(READERS), default='json',
        help='Format of the input. "prompt" is the whitespace-separated '
             'format of the interactive converter, where the lists of '
             'symbol and epsilon transitions are each ended by -1.')
    parser.add_argument('--output', type=pathlib.Path,
        help='File where the converted automaton will be written. Defaults '
             'to stdout.')
    parser.add_argument('--output-format', choices=['text', 'json', 'prompt', 'dot'],
        default='text',
        help='Format of the output.')
    parser.add_argument('--closure-method', choices=list(CLOSURE_METHODS),
        default='search',
        help='Algorithm used to compute epsilon-closures.')
    parser.add_argument('--show-closure', action='store_true', default=False,
        help='Also print the epsilon-closure of every state (text output '
             'only).')
    parser.add_argument('--accepts', action='append', default=[],
        metavar='STRING',
        help='Check whether a string is accepted by the original and the '
             'converted automaton. May be given more than once.')
    parser.add_argument('--log', type=pathlib.Path,
        help='Write conversion events to this file.')
    args = parser.parse_args()

    if args.show_closure and args.output_format != 'text':
        parser.error('--show-closure requires --output-format text')

    try:
        with open_input(args.input) as fin:
            automaton = READERS[args.input_format](fin)
        with contextlib.ExitStack() as stack:
            if args.log is not None:
                log_file = stack.enter_context(args.log.open('w', encoding='utf-8'))
                event_logger = FileLogger(log_file, flush=True)
            else:
                event_logger = NullLogger()
            result = remove_epsilon_transitions_with_closure(
                automaton, args.closure_method, event_logger)
        logger.info(
            f'converted {automaton.state_count} states: '
            f'{len(automaton.transitions)} symbol and '
            f'{len(automaton.epsilon_transitions)} epsilon transitions -> '
            f'{len(result.automaton.transitions)} transitions')
        with open_output(args.output) as fout:
            write_output(
                args.output_format, result.automaton, result.closure,
                args.show_closure, fout)
        for string in args.accepts:
            try:
                before = accepts(automaton, string)
                after = accepts(result.automaton, string)
            except OutOfRange as e:
                logger.warning(f'{string!r}: skipped: {e}')
            else:
                logger.info(f'{string!r}: original {before}, converted {after}')
    except ValueError as e:
        logger.error(f'error: {e}')
        sys.exit(1)

if __name__ == '__main__':
    main()
