import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from dirpicker.errors import ProvisionError
from dirpicker.provision import create_dir_if_not_exists, create_file_if_not_exists


class TestCreateDirIfNotExists(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_create_twice_without_overwrite(self):
        new_dir = self.tmp / "test_dir"
        
        create_dir_if_not_exists(new_dir)
        create_dir_if_not_exists(new_dir)
        
        self.assertTrue(new_dir.is_dir())
        self.assertEqual(list(new_dir.iterdir()), [])
        self.assertEqual([p.name for p in self.tmp.iterdir()], ["test_dir"])

    def test_creates_missing_parents(self):
        nested = self.tmp / "a" / "b" / "c"
        
        create_dir_if_not_exists(str(nested))
        
        self.assertTrue(nested.is_dir())

    def test_existing_contents_kept_without_overwrite(self):
        existing = self.tmp / "keep"
        existing.mkdir()
        (existing / "file.txt").write_text("content")
        
        create_dir_if_not_exists(existing, overwrite=False)
        
        self.assertTrue((existing / "file.txt").exists())

    def test_overwrite_empties_directory(self):
        existing = self.tmp / "replace"
        (existing / "sub").mkdir(parents=True)
        (existing / "file.txt").write_text("content")
        (existing / "sub" / "deep.txt").write_text("content")
        
        create_dir_if_not_exists(existing, overwrite=True)
        
        self.assertTrue(existing.is_dir())
        self.assertEqual(list(existing.iterdir()), [])

    def test_overwrite_on_missing_path_creates_it(self):
        new_dir = self.tmp / "fresh"
        
        create_dir_if_not_exists(new_dir, overwrite=True)
        
        self.assertTrue(new_dir.is_dir())

    def test_parent_is_a_file(self):
        blocker = self.tmp / "blocker"
        blocker.write_text("content")
        
        with self.assertRaises(ProvisionError) as ctx:
            create_dir_if_not_exists(blocker / "child")
        self.assertIn("error creating directory", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    @patch("dirpicker.provision.shutil.rmtree", side_effect=PermissionError("Permission denied"))
    def test_removal_failure(self, mock_rmtree):
        existing = self.tmp / "locked"
        existing.mkdir()
        
        with self.assertRaises(ProvisionError) as ctx:
            create_dir_if_not_exists(existing, overwrite=True)
        self.assertIn("error removing existing directory", str(ctx.exception))
        mock_rmtree.assert_called_once_with(str(existing))

    def test_overwrite_replaces_file_at_path(self):
        target = self.tmp / "was_a_file"
        target.write_text("content")
        
        create_dir_if_not_exists(target, overwrite=True)
        
        self.assertTrue(target.is_dir())
        self.assertEqual(list(target.iterdir()), [])

    @unittest.skipIf(os.name == "nt", "symlinks need privileges on Windows")
    def test_overwrite_replaces_symlink_not_its_target(self):
        real = self.tmp / "real"
        real.mkdir()
        (real / "keep.txt").write_text("content")
        link = self.tmp / "link"
        os.symlink(real, link)
        
        create_dir_if_not_exists(link, overwrite=True)
        
        self.assertFalse(link.is_symlink())
        self.assertTrue(link.is_dir())
        self.assertEqual(list(link.iterdir()), [])
        self.assertTrue((real / "keep.txt").exists())


class TestCreateFileIfNotExists(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_creates_empty_file(self):
        new_file = self.tmp / "test_file.txt"
        
        create_file_if_not_exists(new_file)
        
        self.assertTrue(new_file.is_file())
        self.assertEqual(new_file.stat().st_size, 0)

    def test_existing_file_kept_without_overwrite(self):
        existing = self.tmp / "notes.txt"
        existing.write_text("keep me")
        
        create_file_if_not_exists(existing)
        
        self.assertEqual(existing.read_text(), "keep me")

    def test_overwrite_truncates(self):
        existing = self.tmp / "notes.txt"
        existing.write_text("old content")
        
        create_file_if_not_exists(str(existing), overwrite=True)
        
        self.assertTrue(existing.is_file())
        self.assertEqual(existing.read_text(), "")

    def test_overwrite_replaces_empty_directory_at_path(self):
        target = self.tmp / "was_a_dir"
        target.mkdir()
        
        create_file_if_not_exists(target, overwrite=True)
        
        self.assertTrue(target.is_file())
        self.assertEqual(target.stat().st_size, 0)

    def test_overwrite_refuses_non_empty_directory(self):
        target = self.tmp / "full_dir"
        target.mkdir()
        (target / "file.txt").write_text("content")
        
        with self.assertRaises(ProvisionError):
            create_file_if_not_exists(target, overwrite=True)
        self.assertTrue((target / "file.txt").exists())

    def test_missing_parent_fails(self):
        with self.assertRaises(ProvisionError) as ctx:
            create_file_if_not_exists(self.tmp / "missing" / "file.txt")
        self.assertIn("error creating file", str(ctx.exception))

    @patch("dirpicker.provision.os.remove", side_effect=PermissionError("Permission denied"))
    def test_removal_failure(self, mock_remove):
        existing = self.tmp / "locked.txt"
        existing.write_text("content")
        
        with self.assertRaises(ProvisionError) as ctx:
            create_file_if_not_exists(existing, overwrite=True)
        self.assertIn("error removing existing file", str(ctx.exception))
        # No rollback: the existing file is left as it was
        self.assertEqual(existing.read_text(), "content")


if __name__ == '__main__':
    unittest.main()
