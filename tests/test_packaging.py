"""
Consistency checks between the source headers and the distribution.
"""

import os
import unittest

import gpexplorer as gx

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
PACKAGE = os.path.dirname(os.path.abspath(gx.__file__))


def source_files():
    for dirpath, _, filenames in os.walk(PACKAGE):
        for name in sorted(filenames):
            if name.endswith(".py"):
                yield os.path.join(dirpath, name)


class TestPackaging(unittest.TestCase):

    def test_license_headers(self):
        for path in source_files():
            with open(path, encoding="utf-8") as f:
                header = f.read(400)
            if "License:" not in header:
                continue
            self.assertIn("License: GPLv3", header, path)
            if "see LICENSE" in header:
                self.assertTrue(os.path.exists(os.path.join(ROOT, "LICENSE")), path)

    def test_version(self):
        with open(os.path.join(ROOT, "VERSION")) as f:
            self.assertEqual(f.read().strip(), gx.__version__)

    def test_setup_metadata(self):
        with open(os.path.join(ROOT, "setup.py"), encoding="utf-8") as f:
            setup_py = f.read()
        self.assertIn("name='gpexplorer'", setup_py)
        self.assertNotIn("author_email", setup_py)


if __name__ == "__main__":
    unittest.main(verbosity=2)
