"""Tests for file rename/move/copy/delete/create/backup."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fsitems import AlreadyExistsError, File, Folder, NotFoundError, SameFileError, TargetMissingError, config


class FileOperationTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        config_patch = mock.patch("fsitems.config.CONFIG_PATH", self.root / ".settings" / "config.json")
        config_patch.start()
        self.addCleanup(config_patch.stop)

    def make_file(self, relative: str, contents: str = "test") -> File:
        return File(str(self.root / relative)).put_contents(contents)


class FileRenameTests(FileOperationTestCase):
    def test_rename_keeps_original_path(self) -> None:
        file = self.make_file("test.txt")
        file.rename("new-name.abc")

        self.assertEqual(file.name, "new-name.abc")
        self.assertTrue(file.exists())
        self.assertFalse((self.root / "test.txt").exists())
        self.assertEqual(file.original_path, str(self.root / "test.txt"))

    def test_rename_preserving_extension(self) -> None:
        file = self.make_file("test.txt")
        file.rename("new-name", preserve_extension=True)
        self.assertEqual(file.name, "new-name.txt")

    def test_rename_preserving_compound_extension(self) -> None:
        file = self.make_file("test.ext1.ext2.txt")
        file.rename("new-name", True, 2)
        self.assertEqual(file.name, "new-name.ext2.txt")

        file.rename("new-name-2", True, 10)
        self.assertEqual(file.name, "new-name-2.ext2.txt")

    def test_rename_to_same_name_is_noop(self) -> None:
        file = self.make_file("same.txt")
        self.assertIs(file.rename("same.txt"), file)
        self.assertEqual(file.path, str(self.root / "same.txt"))
        self.assertTrue(file.exists())

    def test_rename_onto_existing_file_fails(self) -> None:
        file = self.make_file("a.txt")
        self.make_file("b.txt")
        with self.assertRaises(AlreadyExistsError):
            file.rename("b.txt")
        self.assertEqual(file.path, str(self.root / "a.txt"))
        self.assertEqual(File(str(self.root / "b.txt")).contents(), "test")

    def test_rename_missing_file_fails(self) -> None:
        with self.assertRaises(NotFoundError):
            File(str(self.root / "missing.txt")).rename("other.txt")

    def test_rename_dry_run_only_updates_path(self) -> None:
        file = self.make_file("a.txt")
        file.rename("b.txt", dry_run=True)
        self.assertEqual(file.path, str(self.root / "b.txt"))
        self.assertTrue((self.root / "a.txt").exists())
        self.assertFalse((self.root / "b.txt").exists())


class FileMoveTests(FileOperationTestCase):
    def test_move_to_folder_path_and_instance(self) -> None:
        target = Folder(str(self.root / "target")).create()
        file = self.make_file("test.txt")
        file.move_to(str(target))

        self.assertEqual(file.path, str(self.root / "target" / "test.txt"))
        self.assertFalse((self.root / "test.txt").exists())

        other = self.make_file("other.txt")
        other.move_to(target)
        self.assertTrue(target.has_file("other.txt"))

    def test_move_into_missing_folder_fails(self) -> None:
        file = self.make_file("test.txt")
        with self.assertRaises(TargetMissingError):
            file.move_to(str(self.root / "nowhere"))
        self.assertTrue(file.exists())

    def test_move_onto_existing_file_requires_overwrite(self) -> None:
        self.make_file("target/test.txt", "old")
        file = self.make_file("test.txt", "new")

        with self.assertRaises(AlreadyExistsError):
            file.move_to(str(self.root / "target"))

        file.move_to(str(self.root / "target"), overwrite=True)
        self.assertEqual(file.contents(), "new")
        self.assertFalse((self.root / "test.txt").exists())

    def test_move_to_own_folder_is_noop(self) -> None:
        file = self.make_file("test.txt")
        self.assertIs(file.move_to(str(self.root)), file)
        self.assertTrue(file.exists())

    @unittest.skipUnless(hasattr(os, "link"), "hard links unavailable")
    def test_move_onto_a_link_to_itself_is_noop(self) -> None:
        file = self.make_file("test.txt", "kept")
        Folder(str(self.root / "target")).create()
        os.link(file.path, self.root / "target" / "test.txt")

        self.assertIs(file.move_to(str(self.root / "target"), overwrite=True), file)
        self.assertEqual(file.path, str(self.root / "test.txt"))
        self.assertEqual(file.contents(), "kept")

    def test_move_missing_file_fails(self) -> None:
        Folder(str(self.root / "target")).create()
        with self.assertRaises(NotFoundError):
            File(str(self.root / "missing.txt")).move_to(str(self.root / "target"))

    def test_move_dry_run(self) -> None:
        Folder(str(self.root / "target")).create()
        file = self.make_file("test.txt")
        file.move_to(str(self.root / "target"), dry_run=True)
        self.assertEqual(file.path, str(self.root / "target" / "test.txt"))
        self.assertTrue((self.root / "test.txt").exists())
        self.assertFalse((self.root / "target" / "test.txt").exists())


class FileCopyTests(FileOperationTestCase):
    def test_copy_returns_new_file_and_keeps_source(self) -> None:
        source = self.make_file("source.txt", "payload")
        copied = source.copy(str(self.root / "nested" / "copy.txt"))

        self.assertIsNot(copied, source)
        self.assertEqual(copied.contents(), "payload")
        self.assertEqual(source.path, str(self.root / "source.txt"))
        self.assertEqual(source.contents(), "payload")

    def test_copy_onto_itself_fails(self) -> None:
        source = self.make_file("source.txt")
        with self.assertRaises(SameFileError):
            source.copy(source)
        with self.assertRaises(SameFileError):
            source.copy(str(self.root / "source.txt"), overwrite=True)
        Folder(str(self.root / "nested")).create()
        with self.assertRaises(SameFileError):
            source.copy(str(self.root / "nested" / ".." / "source.txt"), overwrite=True)
        self.assertEqual(source.contents(), "test")

    def test_copy_onto_existing_requires_overwrite(self) -> None:
        source = self.make_file("source.txt", "new")
        target = self.make_file("target.txt", "old")
        with self.assertRaises(AlreadyExistsError):
            source.copy(target)
        self.assertEqual(target.contents(), "old")

        source.copy(target, overwrite=True)
        self.assertEqual(target.contents(), "new")

    def test_copy_missing_source_fails(self) -> None:
        with self.assertRaises(NotFoundError):
            File(str(self.root / "missing.txt")).copy(str(self.root / "copy.txt"))

    def test_copy_dry_run_returns_target_without_writing(self) -> None:
        source = self.make_file("source.txt")
        copied = source.copy(str(self.root / "copy.txt"), dry_run=True)
        self.assertEqual(copied.path, str(self.root / "copy.txt"))
        self.assertFalse(copied.exists())


class FileLifecycleTests(FileOperationTestCase):
    def test_delete_and_idempotent_delete(self) -> None:
        file = self.make_file("test.txt")
        file.delete()
        self.assertFalse(file.exists())

        self.assertIs(file.delete(), file)
        self.assertEqual(file.path, str(self.root / "test.txt"))

    def test_delete_dry_run_keeps_file(self) -> None:
        file = self.make_file("test.txt")
        file.delete(dry_run=True)
        self.assertTrue(file.exists())

    def test_create_builds_folders_and_keeps_existing_contents(self) -> None:
        file = File(str(self.root / "a" / "b" / "empty.txt")).create()
        self.assertTrue(file.exists())
        self.assertEqual(file.contents(), "")

        kept = self.make_file("kept.txt", "content")
        kept.create()
        self.assertEqual(kept.contents(), "content")

    def test_create_dry_run(self) -> None:
        file = File(str(self.root / "a" / "never.txt")).create(dry_run=True)
        self.assertFalse(file.exists())
        self.assertFalse((self.root / "a").exists())

    def test_touch_updates_modified_time_or_creates(self) -> None:
        file = self.make_file("touched.txt", "content")
        os.utime(file.path, (1_000_000, 1_000_000))
        file.touch()
        self.assertGreater(file.modified_time, 1_000_000)
        self.assertEqual(file.contents(), "content")

        fresh = File(str(self.root / "sub" / "fresh.txt")).touch()
        self.assertTrue(fresh.exists())


class FileBackupTests(FileOperationTestCase):
    def test_backups_probe_numbered_names(self) -> None:
        file = self.make_file("data.txt", "v1")
        first = file.backup()
        file.put_contents("v2")
        second = file.backup()
        file.put_contents("v3")
        third = file.backup()

        self.assertEqual(first.path, str(self.root / "data.txt.backup"))
        self.assertEqual(second.path, str(self.root / "data.txt.001.backup"))
        self.assertEqual(third.path, str(self.root / "data.txt.002.backup"))
        self.assertEqual(first.contents(), "v1")
        self.assertEqual(second.contents(), "v2")
        self.assertEqual(third.contents(), "v3")
        self.assertEqual(file.path, str(self.root / "data.txt"))

    def test_backup_suffix_is_fixed(self) -> None:
        config.save_config({"backup_suffix": "bak"})
        file = self.make_file("data.txt")
        self.assertEqual(file.backup().path, str(self.root / "data.txt.backup"))
        self.assertEqual(file.backup().path, str(self.root / "data.txt.001.backup"))

    def test_backup_missing_file_fails(self) -> None:
        with self.assertRaises(NotFoundError):
            File(str(self.root / "missing.txt")).backup()

    def test_backup_dry_run(self) -> None:
        file = self.make_file("data.txt")
        backup = file.backup(dry_run=True)
        self.assertEqual(backup.path, str(self.root / "data.txt.backup"))
        self.assertFalse(backup.exists())


if __name__ == "__main__":
    unittest.main()
