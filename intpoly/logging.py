"""Indented, timed progress messages on stderr.

 - task(name, **info): context manager around one unit of work; logs its
   start and its duration and accumulates the time spent per nesting path
 - dump_profile(): the accumulated time of every task path
 - event(message): one line, indented under the running tasks

Output only appears with the `verbose` option.
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime
import sys

from intpoly.opts import Option

verbose = Option("verbose", bool, False, description="Log progress to stderr")

_times = defaultdict(float)
_task_stack = []

def log(string):
    if verbose.value:
        print(string, file=sys.stderr)

def _indent(depth):
    return "  " * depth

def _describe(name, info):
    if not info:
        return name
    return "{} [{}]".format(name, ", ".join("{}={}".format(k, v) for k, v in info.items()))

@contextmanager
def task(name, **info):
    _task_stack.append(name)
    path = tuple(_task_stack)
    log("{}{}...".format(_indent(len(path) - 1), _describe(name, info)))
    start = datetime.datetime.now()
    try:
        yield
    finally:
        duration = (datetime.datetime.now() - start).total_seconds()
        _times[path] += duration
        _task_stack.pop()
        log("{}Finished {} [duration={:.3}s]".format(_indent(len(_task_stack)), name, duration))

def event(message):
    log("{}{}".format(_indent(len(_task_stack)), message))

def dump_profile():
    """Log the total time spent in each task, slowest first."""
    for path in sorted(_times, key=_times.get, reverse=True):
        log("{:10.3f}s {}".format(_times[path], " > ".join(path)))
