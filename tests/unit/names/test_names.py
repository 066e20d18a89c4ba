"""Tests for extension parsing and human-readable sizes."""

from __future__ import annotations

import unittest

from fsitems.names import extension, name_without_extension
from fsitems.sizes import human_readable_size


class ExtensionTests(unittest.TestCase):
    def test_compound_extension_respects_part_limit(self) -> None:
        self.assertEqual(extension("file.tar.gz", 2), "tar.gz")
        self.assertEqual(extension("file.tar.gz", 1), "gz")
        self.assertEqual(extension("file", 1), "")

    def test_part_limit_clamps_to_all_but_first_segment(self) -> None:
        self.assertEqual(extension("a.b.c", 10), "b.c")
        self.assertEqual(name_without_extension("a.b.c", 10), "a")

    def test_zero_parts_means_no_extension(self) -> None:
        self.assertEqual(extension("file.txt", 0), "")
        self.assertEqual(name_without_extension("file.txt", 0), "file.txt")

    def test_name_without_extension_for_each_limit(self) -> None:
        name = "test.ext1.ext2.txt"
        self.assertEqual(name_without_extension(name), "test.ext1.ext2")
        self.assertEqual(name_without_extension(name, 2), "test.ext1")
        self.assertEqual(name_without_extension(name, 3), "test")
        self.assertEqual(name_without_extension(name, 4), "test")
        self.assertEqual(extension(name, 3), "ext1.ext2.txt")

    def test_stem_and_extension_rebuild_the_name(self) -> None:
        for name in ("file", "file.txt", "archive.tar.gz", "a.b.c.d", "trailing.", "x..y"):
            for parts in (1, 2, 3, 10):
                with self.subTest(name=name, parts=parts):
                    suffix = extension(name, parts)
                    rebuilt = name_without_extension(name, parts) + (f".{suffix}" if suffix else "")
                    self.assertEqual(rebuilt, name)


class HumanReadableSizeTests(unittest.TestCase):
    def test_bytes_below_one_kilobyte(self) -> None:
        self.assertEqual(human_readable_size(0), "0 B")
        self.assertEqual(human_readable_size(1023), "1023 B")

    def test_binary_units(self) -> None:
        self.assertEqual(human_readable_size(1024), "1 KB")
        self.assertEqual(human_readable_size(1536), "1.5 KB")
        self.assertEqual(human_readable_size(3 * 1024**2), "3 MB")
        self.assertEqual(human_readable_size(1023 * 1024**3), "1023 GB")
        self.assertEqual(human_readable_size(5 * 1024**4), "5 TB")

    def test_values_round_to_two_decimals(self) -> None:
        self.assertEqual(human_readable_size(1024 + 10), "1.01 KB")
        self.assertEqual(human_readable_size(1024**2 - 1), "1024 KB")

    def test_terabytes_do_not_scale_further(self) -> None:
        self.assertEqual(human_readable_size(2048 * 1024**4), "2048 TB")


if __name__ == "__main__":
    unittest.main()
