#!/usr/bin/env python3

"""
Tests for writing compiled scripts to disk.
"""

# Standard Library
import os
import stat
import sys
import tempfile
import unittest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from ffstudiolib.core.project import compile_settings
from ffstudiolib.core.settings import WatermarkSettings
from ffstudiolib.exporters import script_file

#============================================

class ScriptFileTest(unittest.TestCase):
	#============================================
	def test_filenames(self) -> None:
		"""Ensure filenames depend only on batch mode and dialect."""
		self.assertEqual(script_file.script_filename(False, 'windows'), "ffstudio_command.txt")
		self.assertEqual(script_file.script_filename(False, 'bash'), "ffstudio_command.txt")
		self.assertEqual(script_file.script_filename(True, 'windows'), "ffstudio_batch.bat")
		self.assertEqual(script_file.script_filename(True, 'bash'), "ffstudio_batch.sh")
		with self.assertRaises(RuntimeError):
			script_file.script_filename(True, 'single')
		with self.assertRaises(RuntimeError):
			script_file.script_filename(True, 'powershell')

	#============================================
	def test_filename_follows_dialect_extension(self) -> None:
		"""Ensure aliases resolve to the extension their dialect declares."""
		self.assertEqual(script_file.script_filename(True, 'sh'), "ffstudio_batch.sh")
		self.assertEqual(script_file.script_filename(True, 'cmd'), "ffstudio_batch.bat")

	#============================================
	def test_write_is_byte_exact(self) -> None:
		"""Ensure written bytes equal the compiled text."""
		config = WatermarkSettings(is_batch_mode=True)
		text = compile_settings(config, 'windows')
		with tempfile.TemporaryDirectory() as temp_dir:
			out_file = os.path.join(temp_dir, "scripts", "ffstudio_batch.bat")
			script_file.write_script(text, out_file, 'windows')
			with open(out_file, 'rb') as handle:
				data = handle.read()
		self.assertEqual(data, text.encode('utf-8'))

	#============================================
	@unittest.skipIf(os.name == 'nt', "posix permissions only")
	def test_bash_script_is_executable(self) -> None:
		"""Ensure bash scripts get the executable bit."""
		config = WatermarkSettings(is_batch_mode=True)
		text = compile_settings(config, 'bash')
		with tempfile.TemporaryDirectory() as temp_dir:
			out_file = os.path.join(temp_dir, "ffstudio_batch.sh")
			script_file.write_script(text, out_file, 'bash')
			mode = os.stat(out_file).st_mode
		self.assertTrue(mode & stat.S_IXUSR)

#============================================

def main() -> None:
	"""Run the unit tests."""
	unittest.main()

#============================================

if __name__ == "__main__":
	main()
