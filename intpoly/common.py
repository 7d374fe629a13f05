"""Utility functions and classes not found in the standard libraries.

Important functions and classes:
 - open_maybe_stdin/open_maybe_stdout: treat "-" as the standard streams
 - AtomicWriteableFile: a file that only appears once it is fully written
 - FrozenDict: a hashable, orderable immutable dictionary
"""

# builtins
from contextlib import contextmanager
from functools import total_ordering
import sys
import os
import tempfile
import shutil

# 3rd party
from dictionaries import FrozenDict as _FrozenDict


@total_ordering
class FrozenDict(_FrozenDict):
    """
    Immutable dictionary that is hashable (suitable for use in sets/maps)
    and orderable (supports <, >, etc).
    """

    def __lt__(self, other):
        return tuple(sorted(self.items())) < tuple(sorted(other.items()))

    def __repr__(self):
        return "FrozenDict({!r})".format(sorted(self.items()))

@contextmanager
def AtomicWriteableFile(dst, mode="w"):
    """A writeable file handle that does not overwrite until it is closed.

    Usage:

        with AtomicWriteableFile(path) as f:
            ... f.write(...) ...

    If this object is closed due to an exception, it does not write any output
    to the destination path.
    """
    tmp_fd, tmp_path = tempfile.mkstemp(text=True)
    try:
        with os.fdopen(tmp_fd, mode) as f:
            yield f
            f.flush()
            os.fsync(tmp_fd)
    except BaseException:
        os.remove(tmp_path)
        raise
    shutil.move(src=tmp_path, dst=dst)

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)

def open_maybe_stdout(f : str, mode="w"):
    """Open file f, or open standard output if f is "-".

    If this function would open a regular file for writing, it returns an
    AtomicWriteableFile.
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdout.fileno()), mode)
    return AtomicWriteableFile(f, mode)
