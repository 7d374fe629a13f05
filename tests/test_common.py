import os
import tempfile
import unittest

from intpoly.common import FrozenDict, AtomicWriteableFile

class TestCommonUtils(unittest.TestCase):

    def test_frozendict_unordered(self):
        d1 = FrozenDict([(0, 1), (2, 5)])
        d2 = FrozenDict([(2, 5), (0, 1)])
        assert hash(d1) == hash(d2)
        assert d1 == d2

    def test_frozendict_sortable(self):
        d1 = FrozenDict([(0, 1)])
        d2 = FrozenDict([(1, 1)])
        assert (d1 < d2) != (d1 > d2)
        assert d1 <= d1

    def test_frozendict_repr(self):
        d = FrozenDict([(3, -1), (0, 2)])
        self.assertEqual(repr(d), "FrozenDict([(0, 2), (3, -1)])")

    def test_atomic_write(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.txt")
            with AtomicWriteableFile(path) as f:
                f.write(" +1x")
                assert not os.path.exists(path)
            with open(path) as f:
                self.assertEqual(f.read(), " +1x")

    def test_atomic_write_failure_leaves_no_file(self):
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "out.txt")
            with self.assertRaises(RuntimeError):
                with AtomicWriteableFile(path) as f:
                    f.write("partial")
                    raise RuntimeError()
            assert not os.path.exists(path)
