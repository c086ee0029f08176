"""Text output of the benchmark

Everything here is written to stdout. Log records go to stderr so the two
can be separated.
"""
import sys
import repbench

NANOSECONDS = 'nanoseconds'
MICROSECONDS = 'microseconds'
MILLISECONDS = 'milliseconds'
SECONDS = 'seconds'


def format_duration(microseconds):
    """Scales a duration given in microseconds to a readable unit. Returns
    Tuple(<value>, <unit>).

        < 1                     nanoseconds
        <= 1,000                microseconds
        <= 1,000,000            milliseconds
        > 1,000,000             seconds

    """
    if microseconds < 1:
        return microseconds * 1000, NANOSECONDS
    elif microseconds <= 1000:
        return microseconds, MICROSECONDS
    elif microseconds <= 1000000:
        return microseconds / 1000, MILLISECONDS
    else:
        return microseconds / 1000000, SECONDS


class Reporter(object):
    def __init__(self, stream=None, progress_decimals=None,
                 significant_digits=None):
        self._stream = stream
        if progress_decimals is None:
            progress_decimals = \
                repbench.settings['reporting']['progress_decimals'].get(int)
        if significant_digits is None:
            significant_digits = \
                repbench.settings['reporting']['significant_digits'].get(int)
        self.progress_decimals = progress_decimals
        self.significant_digits = significant_digits

    @property
    def stream(self):
        # Resolved late so redirect_stdout works on an existing reporter
        return self._stream or sys.stdout

    def write(self, text):
        self.stream.write(text)
        self.stream.flush()

    def progress(self, done, total):
        """Overwrites the current line with the run progress"""
        pct = done / total * 100
        self.write(f'Progress: {done}/{total} ... '
                   f'{pct:.{self.progress_decimals}f}% done.\r')

    def stdin_notice(self):
        self.write('Child process may be awaiting input from stdin:\n')

    def exit_code(self, code):
        self.write(f'Program completed with exit code {code}\n')

    def crash_warning(self):
        self.write('Warning, program may have crashed or thrown an exception '
                   'mid run, profiling may be inaccurate.\n')

    def duration(self, microseconds):
        value, unit = format_duration(microseconds)
        self.write(f'\nMeasured duration: '
                   f'{value:.{self.significant_digits}g} {unit}\n')

    def error(self, err):
        self.write(f'{err}\n')
