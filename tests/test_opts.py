import argparse
import contextlib
import io
import unittest

from intpoly import opts
from intpoly import logging

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.snap = opts.snapshot()

    def tearDown(self):
        opts.restore(self.snap)

    def test_setup_and_read(self):
        parser = argparse.ArgumentParser()
        opts.setup(parser)
        opts.read(parser.parse_args(["--verbose"]))
        self.assertTrue(logging.verbose.value)
        opts.read(parser.parse_args([]))
        self.assertFalse(logging.verbose.value)

    def test_option_is_not_a_bool(self):
        with self.assertRaises(Exception):
            bool(logging.verbose)

    def test_snapshot_restore(self):
        logging.verbose.value = True
        self.assertTrue(opts.snapshot()["verbose"])
        opts.restore(self.snap)
        self.assertFalse(logging.verbose.value)

class TestLogging(unittest.TestCase):

    def setUp(self):
        self.snap = opts.snapshot()

    def tearDown(self):
        opts.restore(self.snap)

    def capture(self):
        err = io.StringIO()
        return err, contextlib.redirect_stderr(err)

    def test_silent_by_default(self):
        err, redirect = self.capture()
        with redirect:
            with logging.task("outer"):
                logging.event("hello")
        self.assertEqual(err.getvalue(), "")

    def test_verbose_indents_nested_tasks(self):
        logging.verbose.value = True
        err, redirect = self.capture()
        with redirect:
            with logging.task("outer", n=2):
                logging.event("hello")
                with logging.task("inner"):
                    pass
        lines = err.getvalue().splitlines()
        self.assertEqual(lines[0], "outer [n=2]...")
        self.assertEqual(lines[1], "  hello")
        self.assertEqual(lines[2], "  inner...")
        self.assertTrue(lines[3].startswith("  Finished inner"))
        self.assertTrue(lines[4].startswith("Finished outer"))

    def test_profile_lists_task_paths(self):
        with logging.task("timed"):
            with logging.task("nested"):
                pass
        logging.verbose.value = True
        err, redirect = self.capture()
        with redirect:
            logging.dump_profile()
        lines = err.getvalue().splitlines()
        self.assertTrue(any(line.endswith("s timed") for line in lines))
        self.assertTrue(any(line.endswith("s timed > nested") for line in lines))

    def test_profile_silent_by_default(self):
        with logging.task("timed"):
            pass
        err, redirect = self.capture()
        with redirect:
            logging.dump_profile()
        self.assertEqual(err.getvalue(), "")
