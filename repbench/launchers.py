"""Process launcher used by the benchmark runner

Children are started directly (no shell) with subprocess.Popen, and the
caller blocks until they exit. There is no timeout: a child that never exits
will hang the benchmark.
"""
import logging
import os
import subprocess
import time
from repbench import exc

log = logging.getLogger(__name__)


def resolve_executable(executable):
    """A bare name that exists in the working directory is run from there,
    like any other path. Names that do not exist are left to the PATH search
    of subprocess."""
    if not os.path.dirname(executable) and os.path.isfile(executable):
        return os.path.join(os.curdir, executable)
    return executable


class ProcessLauncher(object):
    """Spawns one child at a time. Subclass and override spawn/wait/clock to
    run the benchmark against something other than local processes."""
    def spawn(self, executable, args=(), stdin=None, stdout=None, stderr=None):
        cmd = [resolve_executable(executable), *args]
        log.debug(f'Spawn: {cmd}')

        try:
            return subprocess.Popen(
                cmd,
                stdin=stdin,
                stdout=stdout,
                stderr=stderr
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            reason = getattr(e, 'strerror', None) or str(e)
            raise exc.LaunchFailure(executable, reason) from e

    def wait(self, handle):
        """Blocks until the child exits and returns its exit code"""
        rc = handle.wait()
        log.debug(f'Child {handle.pid} exited: {rc}')
        return rc

    def clock(self):
        """Monotonic time in microseconds"""
        return time.perf_counter_ns() / 1000
