import json
import os

import pytest

from bincodec.fixtures.examples import EXAMPLES
from bincodec_cli import emit_fixtures, verify_fixtures
from bincodec_cli.main import CliManager, main
from bincodec_cli.util import LoggingOutput, process_logging_options, process_logging_output
from bincodec_tests import unittest


def test_process_logging_args() -> None:
    argv = ['bincodec-cli', '--json-logs', '--format', 'hex', '--debug']
    assert process_logging_output(argv) == LoggingOutput.JSON
    assert process_logging_options(argv).debug
    assert argv == ['bincodec-cli', '--format', 'hex']


def test_help(capsys) -> None:
    assert CliManager(['bincodec-cli', 'help']).execute_from_command_line() == 0
    out = capsys.readouterr().out
    assert 'emit_fixtures' in out
    assert 'verify_fixtures' in out


def test_unknown_command(capsys) -> None:
    assert CliManager(['bincodec-cli', 'nope']).execute_from_command_line() == -1
    assert 'Unknown command: "nope"' in capsys.readouterr().out


class EmitFixturesTestCase(unittest.TestCase):
    @pytest.fixture(autouse=True)
    def _capsys(self, capsys):
        self.capsys = capsys

    def _run(self, *args: str) -> int:
        return CliManager(['bincodec-cli', 'emit_fixtures', '--disable-logs', *args]).execute_from_command_line()

    def test_zig_to_stdout(self) -> None:
        self.assertEqual(self._run(), 0)
        lines = self.capsys.readouterr().out.splitlines()
        self.assertEqual(lines[0], self._settings.ZIG_HEADER)
        self.assertEqual(lines[-1], 'pub const bool_true: []const u8 = &.{ 0x1,  };')

    def test_json_to_file(self) -> None:
        output = os.path.join(self.mkdtemp(), 'examples.json')
        self.assertEqual(self._run('--format', 'json', '--output', output), 0)
        with open(output) as f:
            data = json.load(f)
        self.assertEqual(data, {i.name: i.encode().hex() for i in EXAMPLES})

    def test_fixtures_yaml(self) -> None:
        fixtures_yaml = os.path.join(self.mkdtemp(), 'fixtures.yml')
        with open(fixtures_yaml, 'w') as f:
            f.write('fixtures:\n  answer: {shape: u16, value: 42}\n')
        self.assertEqual(self._run('--format', 'hex', '--fixtures-yaml', fixtures_yaml), 0)
        self.assertEqual(self.capsys.readouterr().out, 'answer 2a00\n')

    def test_stdout_only_has_fixtures(self) -> None:
        self.log.info('about to emit fixtures')
        self.assertEqual(self._run('--format', 'hex'), 0)
        lines = self.capsys.readouterr().out.splitlines()
        self.assertEqual([line.split(' ')[0] for line in lines], [i.name for i in EXAMPLES])

    def test_main_directly(self) -> None:
        self.assertEqual(emit_fixtures.main(['--format', 'hex']), 0)
        self.assertIn('int_u128 6d000000000000000000000000000000', self.capsys.readouterr().out.splitlines())


class VerifyFixturesTestCase(unittest.TestCase):
    def _write_input(self, data) -> str:
        filepath = os.path.join(self.mkdtemp(), 'input.json')
        with open(filepath, 'w') as f:
            json.dump(data, f)
        return filepath

    def _run(self, *args: str) -> int:
        return CliManager(['bincodec-cli', 'verify_fixtures', '--disable-logs', *args]).execute_from_command_line()

    def test_match(self) -> None:
        filepath = self._write_input({i.name: i.encode().hex() for i in EXAMPLES})
        self.assertEqual(self._run(filepath), 0)

    def test_mismatch(self) -> None:
        filepath = self._write_input({'int_u8': '66'})
        self.assertEqual(self._run(filepath), 1)

    def test_unknown_name(self) -> None:
        filepath = self._write_input({'int_u9': '00'})
        self.assertEqual(self._run(filepath), 1)

    def test_max_bytes(self) -> None:
        data = {'test_type': EXAMPLES[0].encode().hex() + '00'}
        filepath = self._write_input(data)
        self.assertEqual(verify_fixtures.main([filepath, '--max-bytes', '8']), 1)

    def test_invalid_input(self) -> None:
        filepath = self._write_input(['not', 'an', 'object'])
        with self.assertRaises(SystemExit) as cm:
            verify_fixtures.main([filepath])
        self.assertEqual(cm.exception.code, 2)


def test_main_exit_code(monkeypatch, tmp_path) -> None:
    filepath = tmp_path / 'input.json'
    filepath.write_text(json.dumps({'bool_true': '01'}))
    monkeypatch.setattr('sys.argv', ['bincodec-cli', 'verify_fixtures', '--disable-logs', str(filepath)])
    with pytest.raises(SystemExit) as exc_info:
        main()
    assert exc_info.value.code == 0
