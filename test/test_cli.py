import os
import sys
import tempfile
import repbench
from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, skipIf
from repbench.cli import main as cli_main, split_args

repbench.settings.clear()
repbench.settings.read(user=False)


def write_script(path, body):
    with open(path, 'w') as fp:
        fp.write(f'#!{sys.executable}\n{body}\n')
    os.chmod(path, 0o755)


class TestCli(TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.temp_dir.cleanup()

    def path(self, name):
        return os.path.join(self.temp_dir.name, name)

    def run_cli(self, *tokens):
        out = StringIO()
        with redirect_stdout(out):
            cli_main(['-l', 'silent', *tokens])
        return out.getvalue()

    def assertFails(self, *tokens):
        out = StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                cli_main(['-l', 'silent', *tokens])
        self.assertEqual(cm.exception.code, 1)
        return out.getvalue()

    def test_benchmark(self):
        output = self.run_cli(
            sys.executable, '--count', '3', 'process', '-c', 'pass')
        self.assertIn('Measured duration:', output)
        self.assertNotIn('exit code', output)

    def test_single_run_reports_exit_code(self):
        output = self.run_cli(
            sys.executable, 'process', '-c', 'import sys; sys.exit(4)')
        self.assertIn('Program completed with exit code 4', output)
        self.assertIn('may have crashed', output)

    def test_redirects(self):
        out = self.path('out.txt')
        err = self.path('err.txt')
        output = self.run_cli(
            sys.executable, '--out', out, '--err', err, 'process', '-c',
            'import sys; print("hello"); print("oops", file=sys.stderr)'
        )
        self.assertIn('Measured duration:', output)
        with open(out) as fp:
            self.assertEqual(fp.read().strip(), 'hello')
        with open(err) as fp:
            self.assertEqual(fp.read().strip(), 'oops')

    def test_no_executable(self):
        output = self.assertFails()
        self.assertIn('No runnable executable specified.', output)

    def test_unknown_argument(self):
        output = self.assertFails(sys.executable, '--bogus')
        self.assertIn('--bogus', output)

    def test_zero_count(self):
        output = self.assertFails(
            sys.executable, '--count', '0', 'process', '-c', 'pass')
        self.assertIn('Count must be larger than 0.', output)

    def test_missing_value(self):
        output = self.assertFails(sys.executable, '--out')
        self.assertIn('Unexpected end of argument list', output)

    def test_unwritable_output(self):
        out = self.path(os.path.join('missing', 'out.txt'))
        output = self.assertFails(
            sys.executable, '--out', out, 'process', '-c', 'pass')
        self.assertIn('STD_OUT', output)
        self.assertNotIn('Measured duration', output)

    def test_launch_failure(self):
        output = self.assertFails('/definitely/not/a/real/program')
        self.assertIn('/definitely/not/a/real/program', output)

    @skipIf(os.geteuid() == 0, 'root ignores directory permissions')
    def test_read_only_output_directory(self):
        locked = self.path('locked')
        os.mkdir(locked)
        os.chmod(locked, 0o500)
        self.addCleanup(os.chmod, locked, 0o700)

        output = self.assertFails(
            sys.executable, '--out', os.path.join(locked, 'out.txt'),
            'process', '-c', 'pass')
        self.assertIn('STD_OUT', output)

    def test_option_as_first_token(self):
        """the first token is always the executable, even if it looks like
        an option, so errors come from the run configuration"""
        output = self.assertFails('--count', '3')
        self.assertIn('Unexpected or illegal argument encountered: 3', output)

        out = StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as cm:
                cli_main(['--bogus'])
        self.assertEqual(cm.exception.code, 1)
        self.assertIn('--bogus', out.getvalue())

    def test_executable_in_working_directory(self):
        original_dir = os.getcwd()
        os.chdir(self.temp_dir.name)
        try:
            write_script('myprog', 'print("ran")')
            output = self.run_cli('myprog', '--out', 'out.txt')
            with open('out.txt') as fp:
                ran = fp.read().strip()
        finally:
            os.chdir(original_dir)

        self.assertIn('Measured duration:', output)
        self.assertEqual(ran, 'ran')

    def test_split_args(self):
        self.assertEqual(
            split_args(['-l', 'silent', './prog', '-l', 'x']),
            (['-l', 'silent'], ['./prog', '-l', 'x'])
        )
        self.assertEqual(split_args(['--count', '3']), ([], ['--count', '3']))
        self.assertEqual(
            split_args(['--logging=debug', 'prog']),
            (['--logging=debug'], ['prog'])
        )
