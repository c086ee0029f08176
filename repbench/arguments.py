"""Turns the flat list of command tokens into a RunConfiguration

The first token is always the executable. The rest is scanned left to right:

    --count N       number of runs, decimal digits only, at least 1
    --in PATH       file bound to the child's stdin
    --out PATH      file bound to the child's stdout
    --err PATH      file bound to the child's stderr
    process ARG...  every remaining token is passed to the child verbatim

"""
import enum
import logging
import re
from repbench import exc

log = logging.getLogger(__name__)

# Largest count accepted, the range of an unsigned 64-bit integer
COUNT_MAX = 2 ** 64 - 1

_digits = re.compile(r'[0-9]+')


class ArgumentKind(enum.Enum):
    COUNT = 'count'
    STREAM_IN = 'in'
    STREAM_OUT = 'out'
    STREAM_ERR = 'err'
    PROCESS_ARGS_MARKER = 'process'
    UNKNOWN = 'unknown'


_options = {
    '--count': ArgumentKind.COUNT,
    '--in': ArgumentKind.STREAM_IN,
    '--out': ArgumentKind.STREAM_OUT,
    '--err': ArgumentKind.STREAM_ERR,
    'process': ArgumentKind.PROCESS_ARGS_MARKER,
}

_stream_attrs = {
    ArgumentKind.STREAM_IN: 'input_path',
    ArgumentKind.STREAM_OUT: 'output_path',
    ArgumentKind.STREAM_ERR: 'error_path',
}


def classify(token):
    """Returns the ArgumentKind of a token, UNKNOWN if it is not an option"""
    return _options.get(token, ArgumentKind.UNKNOWN)


def parse_count(value):
    """Validates the value given to --count and returns it as an int"""
    if not _digits.fullmatch(value):
        raise exc.InvalidCountFormat(value)

    count = int(value)

    if count > COUNT_MAX:
        raise exc.CountOutOfRange(value)

    if count == 0:
        raise exc.ZeroCount()

    return count


class RunConfiguration(object):
    """Everything needed to benchmark one executable. Empty stream paths mean
    the child inherits that stream from this process."""
    def __init__(self, executable_path, count=1, input_path='',
                 output_path='', error_path='', process_arguments=None):
        if not executable_path:
            raise exc.MissingExecutable()

        if count < 1:
            raise exc.ZeroCount()

        self.executable_path = executable_path
        self.count = count
        self.input_path = input_path
        self.output_path = output_path
        self.error_path = error_path
        self.process_arguments = list(process_arguments or [])

    def __repr__(self):
        return f'<RunConfiguration {self.executable_path} count={self.count}>'

    def __eq__(self, other):
        if not isinstance(other, RunConfiguration):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @classmethod
    def from_tokens(cls, tokens):
        return build_configuration(tokens)

    @property
    def redirects_all_streams(self):
        return bool(self.input_path and self.output_path and self.error_path)

    def to_dict(self):
        return vars(self).copy()


def build_configuration(tokens):
    """Scans the command tokens and returns a RunConfiguration. Raises a
    BenchmarkError subclass at the first token that cannot be used."""
    tokens = list(tokens)
    log.debug(f'Building run configuration: {tokens}')

    if not tokens:
        raise exc.MissingExecutable()

    options = dict()
    iterator = iter(tokens[1:])

    for token in iterator:
        kind = classify(token)

        if kind is ArgumentKind.UNKNOWN:
            raise exc.UnknownArgument(token)

        if kind is ArgumentKind.PROCESS_ARGS_MARKER:
            options['process_arguments'] = list(iterator)
            break

        try:
            value = next(iterator)
        except StopIteration:
            raise exc.MissingOptionValue(token) from None

        if kind is ArgumentKind.COUNT:
            options['count'] = parse_count(value)
        else:
            options[_stream_attrs[kind]] = value

    return RunConfiguration(tokens[0], **options)
