"""Benchmark execution loop"""
import logging
import repbench
from repbench import streams
from repbench.averages import RunningAverage, discard_iteration
from repbench.launchers import ProcessLauncher
from repbench.reporting import Reporter

log = logging.getLogger(__name__)


class IterationResult(object):
    """Elapsed time (microseconds) and exit code of a single run"""
    __slots__ = ('elapsed', 'exit_code')

    def __init__(self, elapsed, exit_code):
        self.elapsed = elapsed
        self.exit_code = exit_code

    def __repr__(self):
        return f'<IterationResult elapsed={self.elapsed} rc={self.exit_code}>'


class BenchmarkResult(object):
    def __init__(self, mean, count, retained, discarded, failures, exit_code):
        self.mean = mean
        self.count = count
        self.retained = retained
        self.discarded = discarded
        self.failures = failures
        self.exit_code = exit_code

    def __repr__(self):
        return f'<BenchmarkResult mean={self.mean} retained={self.retained}>'

    def to_dict(self):
        return vars(self).copy()


class BenchmarkRunner(object):
    """Runs the configured executable ``config.count`` times, one child at a
    time, and keeps a running mean of the elapsed times.

    The first error (a stream that cannot be opened, a child that cannot be
    launched) aborts the whole benchmark. Children that exit with a non-zero
    code are still measured, and a warning is printed after the loop.

    :param config: RunConfiguration
    :param launcher: ProcessLauncher or compatible object, a new
        ProcessLauncher is used if this is None.
    :param reporter: Reporter for text output, defaults to stdout.
    """
    def __init__(self, config, launcher=None, reporter=None):
        self.config = config
        self.launcher = launcher or ProcessLauncher()
        self.reporter = reporter or Reporter()
        self.discard_index = repbench.settings['warmup']['discard_index'].get(int)
        self.min_count = repbench.settings['warmup']['min_count'].get(int)

    def show_progress(self):
        return self.config.redirects_all_streams and self.config.count > 1

    def run_once(self):
        """Launches the executable once and blocks until it exits"""
        config = self.config

        with streams.open_streams(config) as (stdin, stdout, stderr):
            start = self.launcher.clock()
            handle = self.launcher.spawn(
                config.executable_path,
                config.process_arguments,
                stdin=stdin,
                stdout=stdout,
                stderr=stderr
            )
            rc = self.launcher.wait(handle)
            end = self.launcher.clock()

        return IterationResult(max(end - start, 0.0), rc)

    def run(self):
        config = self.config
        log.info(f'Benchmarking {config.executable_path} '
                 f'({config.count} runs)')

        streams.prepare_streams(config)

        if not config.input_path:
            self.reporter.stdin_notice()

        average = RunningAverage()
        discarded = 0
        failures = 0
        rc = 0

        for i in range(config.count):
            if self.show_progress():
                self.reporter.progress(i + 1, config.count)

            result = self.run_once()
            rc = result.exit_code
            log.debug(f'Run {i + 1}/{config.count}: {result}')

            if config.count == 1:
                self.reporter.exit_code(rc)

            if rc != 0:
                failures += 1

            if discard_iteration(i, config.count, self.discard_index,
                                 self.min_count):
                log.debug(f'Discarding run {i + 1} as warm-up')
                discarded += 1
                continue

            average.add(result.elapsed)

        if failures:
            log.warning(f'{failures} of {config.count} runs exited non-zero')
            self.reporter.crash_warning()

        self.reporter.duration(average.mean)

        return BenchmarkResult(
            mean=average.mean,
            count=config.count,
            retained=average.count,
            discarded=discarded,
            failures=failures,
            exit_code=rc
        )
