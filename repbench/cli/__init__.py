"""Run an executable repeatedly and report its mean duration

options after the executable:
  --count N       number of runs [1]
  --in PATH       file to use as stdin of each run
  --out PATH      file to use as stdout of each run (truncated)
  --err PATH      file to use as stderr of each run (truncated)
  process ARG...  pass every following argument to the executable, this
                  must be the last option

When --count is 5 or more, the second run is left out of the mean.
"""
import argparse
import logging
import sys
import repbench

log = logging.getLogger('repbench.cli')


def arg_parser():
    parser = argparse.ArgumentParser(
        prog='repbench',
        usage='%(prog)s [-h] [-v] [-l PROFILE] EXECUTABLE [OPTIONS]',
        allow_abbrev=False,
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=repbench.__version__
    )

    parser.add_argument(
        '-l', '--logging',
        choices=list(repbench.settings['logging_profiles'].keys()),
        help='set the logging profile [interactive]'
    )

    return parser


def split_args(args):
    """Splits the command line into Tuple(<repbench options>, <tokens>). The
    tokens start at the first argument that is not an option of repbench
    itself, which is the executable. They are never seen by argparse, so a
    bad token is reported by the run configuration builder."""
    i = 0

    while i < len(args):
        arg = args[i]
        if arg in ('-l', '--logging'):
            i += 2
        elif arg in ('-h', '--help', '-v', '--version') \
                or arg.startswith('--logging='):
            i += 1
        else:
            break

    return args[:i], args[i:]


def main(args=None):
    if args is None:
        args = sys.argv[1:]

    options, tokens = split_args(list(args))
    parser = arg_parser()
    args = parser.parse_args(options)

    repbench.start_logging(args.logging)
    log.debug(f'Version: {repbench.__version__}')
    log.debug(f'Command args: {sys.argv}')

    try:
        config = repbench.build_configuration(tokens)
        log.debug(f'Run configuration:\n'
                  f'{repbench.utils.dumps_yaml(config.to_dict())}')
        result = repbench.BenchmarkRunner(config).run()
    except repbench.BenchmarkError as e:
        log.debug('Benchmark aborted', exc_info=True)
        repbench.Reporter().error(e)
        raise SystemExit(1)

    log.debug(f'Result:\n{repbench.utils.dumps_yaml(result.to_dict())}')
