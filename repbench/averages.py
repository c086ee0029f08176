import logging

log = logging.getLogger(__name__)


def discard_iteration(index, count, discard_index=1, min_count=5):
    """Returns True if the timing of iteration ``index`` (zero-based) should
    be left out of the mean. By default the second run is treated as a cold
    start outlier when at least five runs are requested."""
    return index == discard_index and count >= min_count


class RunningAverage(object):
    """Mean that is updated one sample at a time without keeping the samples.

        >>> avg = RunningAverage()
        >>> for s in (10, 20, 30):
        ...     avg.add(s)
        >>> avg.mean
        20.0

    """
    def __init__(self):
        self.mean = 0.0
        self.count = 0
        self.first = True

    def __repr__(self):
        return f'<RunningAverage mean={self.mean} count={self.count}>'

    def add(self, sample):
        self.count += 1
        n = self.count

        if self.first:
            self.mean = float(sample)
            self.first = False
        else:
            self.mean = (self.mean * (n - 1) + sample) / n
