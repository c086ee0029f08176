"""Redirect targets for the benchmarked program

prepare_streams() checks every declared path once before the first run.
open_streams() opens them again for each run and always closes them, even
when launching the child fails.
"""
import contextlib
import logging
import subprocess
from repbench import exc

log = logging.getLogger(__name__)


def _targets(config):
    """Yields (stream name, path, mode) for each declared redirect"""
    if config.input_path:
        yield 'STD_IN', config.input_path, 'r'

    if config.output_path:
        yield 'STD_OUT', config.output_path, 'w'

    if config.error_path:
        yield 'STD_ERR', config.error_path, 'w'


def _open(stream, path, mode):
    try:
        return open(path, mode)
    except OSError as e:
        raise exc.StreamOpenFailure(stream, path, e.strerror) from e


def prepare_streams(config):
    """Opens each declared path in the mode for its direction and releases it
    immediately. Output and error files are created or truncated here."""
    with contextlib.ExitStack() as stack:
        for stream, path, mode in _targets(config):
            stack.enter_context(_open(stream, path, mode))
            log.debug(f'{stream} redirect ok: {path}')


@contextlib.contextmanager
def open_streams(config):
    """Context manager yielding (stdin, stdout, stderr) for one run. None
    means the child inherits the stream. If stdout and stderr point to the
    same file, stderr is merged into stdout."""
    with contextlib.ExitStack() as stack:
        stdin = stdout = stderr = None

        if config.input_path:
            stdin = stack.enter_context(
                _open('STD_IN', config.input_path, 'r'))

        if config.output_path:
            stdout = stack.enter_context(
                _open('STD_OUT', config.output_path, 'w'))

        if config.error_path:
            if config.error_path == config.output_path:
                stderr = subprocess.STDOUT
            else:
                stderr = stack.enter_context(
                    _open('STD_ERR', config.error_path, 'w'))

        yield stdin, stdout, stderr
