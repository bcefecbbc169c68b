import contextlib
import io
import json
import pathlib
import sys
import tempfile
import unittest
import unittest.mock

import convert_enfa
import generate_random_enfa
from enfa.formal_models.serialization import automaton_from_json
from enfa.logging import read_log_file

PROMPT_INPUT = '''\
2
1
a
0
1
1
1 a 1
-1
0 1
1 0
-1
'''

def run(module, argv):
    stdout = io.StringIO()
    stderr = io.StringIO()
    with unittest.mock.patch.object(sys, 'argv', ['prog'] + argv), \
            contextlib.redirect_stdout(stdout), \
            contextlib.redirect_stderr(stderr):
        module.main()
    return stdout.getvalue()

class TestConvertEnfa(unittest.TestCase):

    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.dir = pathlib.Path(self.tempdir.name)
        self.input = self.dir / 'input.txt'
        self.input.write_text(PROMPT_INPUT, encoding='utf-8')

    def tearDown(self):
        self.tempdir.cleanup()

    def test_text_output(self):
        output = run(convert_enfa, [
            '--input', str(self.input), '--input-format', 'prompt',
            '--show-closure'])
        self.assertEqual(output, '''\
Epsilon closures:
0: {0, 1}
1: {0, 1}
===== ε-free NFA =====
Start state: 0
Final states: 0 1
Transitions:
0 --a--> 0
0 --a--> 1
1 --a--> 0
1 --a--> 1
''')

    def test_json_output_and_log(self):
        output_path = self.dir / 'output.json'
        log_path = self.dir / 'events.log'
        run(convert_enfa, [
            '--input', str(self.input), '--input-format', 'prompt',
            '--output', str(output_path), '--output-format', 'json',
            '--closure-method', 'matrix', '--log', str(log_path)])
        with output_path.open(encoding='utf-8') as fin:
            N = automaton_from_json(json.load(fin))
        self.assertEqual(N.accept_states, {0, 1})
        self.assertFalse(N.has_epsilon_transitions)
        with log_path.open(encoding='utf-8') as fin:
            events = list(read_log_file(fin))
        self.assertEqual(
            [e.type for e in events],
            ['closure', 'rewrite', 'acceptance', 'conversion'])
        self.assertEqual(events[0].data['method'], 'matrix')

    def test_dot_output(self):
        output = run(convert_enfa, [
            '--input', str(self.input), '--input-format', 'prompt',
            '--output-format', 'dot', '--accepts', 'aa'])
        self.assertTrue(output.startswith('digraph {\n'))
        self.assertIn('\tq0 [label="0",shape=doublecircle];\n', output)

    def test_accepts_with_unknown_symbol(self):
        output = run(convert_enfa, [
            '--input', str(self.input), '--input-format', 'prompt',
            '--output-format', 'dot', '--accepts', 'ab', '--accepts', 'aa'])
        self.assertTrue(output.startswith('digraph {\n'))
        self.assertTrue(output.endswith('}\n'))

    def test_show_closure_requires_text(self):
        with self.assertRaises(SystemExit) as cm:
            run(convert_enfa, [
                '--input', str(self.input), '--input-format', 'prompt',
                '--output-format', 'json', '--show-closure'])
        self.assertEqual(cm.exception.code, 2)

    def test_invalid_input(self):
        self.input.write_text('2 1 a 0 1 5 -1 -1', encoding='utf-8')
        with self.assertRaises(SystemExit) as cm:
            run(convert_enfa, [
                '--input', str(self.input), '--input-format', 'prompt'])
        self.assertEqual(cm.exception.code, 1)

class TestGenerateRandomEnfa(unittest.TestCase):

    def test_generate(self):
        argv = ['--states', '5', '--alphabet', 'xy', '--seed', '7',
            '--epsilon-prob', '0.5']
        output1 = run(generate_random_enfa, argv)
        output2 = run(generate_random_enfa, argv)
        self.assertEqual(output1, output2)
        M = automaton_from_json(json.loads(output1))
        self.assertEqual(M.state_count, 5)
        self.assertEqual(list(M.alphabet), ['x', 'y'])

    def test_bad_probability(self):
        with self.assertRaises(SystemExit) as cm:
            run(generate_random_enfa, ['--states', '3', '--epsilon-prob', '2'])
        self.assertEqual(cm.exception.code, 2)

if __name__ == '__main__':
    unittest.main()
