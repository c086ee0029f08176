"""Benchmark exceptions

Every error here is fatal for the run: nothing is retried. The cli prints the
message and exits with status 1. A non-zero exit code from the benchmarked
program is not an error and has no exception class.
"""


class BenchmarkError(Exception):
    pass


class MissingExecutable(BenchmarkError):
    def __init__(self):
        super(MissingExecutable, self).__init__(
            'No runnable executable specified.')


class UnknownArgument(BenchmarkError):
    def __init__(self, token):
        self.token = token
        super(UnknownArgument, self).__init__(
            f'Unexpected or illegal argument encountered: {token}')


class MissingOptionValue(BenchmarkError):
    def __init__(self, option):
        self.option = option
        super(MissingOptionValue, self).__init__(
            f'Unexpected end of argument list: {option} requires a value.')


class InvalidCountFormat(BenchmarkError):
    def __init__(self, value):
        self.value = value
        super(InvalidCountFormat, self).__init__(
            f'Argument for --count is either negative or contains '
            f'non-numeric characters: "{value}"')


class CountOutOfRange(BenchmarkError):
    def __init__(self, value):
        self.value = value
        super(CountOutOfRange, self).__init__(
            f'Number too large for --count: {value}')


class ZeroCount(BenchmarkError):
    def __init__(self):
        super(ZeroCount, self).__init__('Count must be larger than 0.')


class StreamOpenFailure(BenchmarkError):
    """Raised when a redirect target cannot be opened. ``stream`` is one of
    STD_IN, STD_OUT, STD_ERR."""
    def __init__(self, stream, path, reason=None):
        self.stream = stream
        self.path = path
        mode = 'reading' if stream == 'STD_IN' else 'writing'
        msg = f'{stream} file cannot be opened for {mode}: {path}'
        if reason:
            msg += f' ({reason})'
        super(StreamOpenFailure, self).__init__(msg)


class LaunchFailure(BenchmarkError):
    def __init__(self, executable, reason):
        self.executable = executable
        super(LaunchFailure, self).__init__(
            f'Failed to launch {executable}: {reason}')
