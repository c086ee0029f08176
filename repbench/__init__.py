import logging
import logging.config
import sys
import confuse

__version__ = '0.1.0'


# Load settings and configure logging
settings = confuse.LazyConfig('repbench', __name__)
log = logging.getLogger(__name__)
log.addHandler(logging.NullHandler())


# Package module imports
from repbench import arguments, averages, exc, launchers, reporting, runner, \
    streams, utils
from repbench.arguments import ArgumentKind, RunConfiguration, classify, \
    build_configuration
from repbench.averages import RunningAverage, discard_iteration
from repbench.exc import BenchmarkError
from repbench.launchers import ProcessLauncher
from repbench.reporting import Reporter, format_duration
from repbench.runner import BenchmarkRunner, BenchmarkResult, IterationResult


def start_logging(profile=None):
    """Logging is only set up with a NullHandler by default. This function sets
    up logging with the chosen settings profile. """
    if profile is None:
        if sys.stdin and sys.stdin.isatty() and sys.stdout and sys.stdout.isatty():
            profile = 'interactive'
        else:
            profile = 'basic'

    profile = str(profile).lower()
    config = settings['logging_profiles'][profile].get(dict)
    logging.config.dictConfig(config)
    log.debug(f'Logging started: {profile}')
