#!/usr/bin/env python3

"""
Unit tests for tools/ffstudio_yaml_writer.py.
"""

# Standard Library
import os
import sys
import tempfile
import unittest

# local repo modules
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)
TOOLS_DIR = os.path.join(REPO_ROOT, "tools")
if TOOLS_DIR not in sys.path:
	sys.path.insert(0, TOOLS_DIR)
import ffstudio_yaml_writer
from ffstudiolib.core.loader import SettingsLoader

#============================================

class FfstudioYamlWriterTest(unittest.TestCase):
	#============================================
	def test_format_value(self) -> None:
		"""Ensure numbers are written in short form."""
		self.assertEqual(ffstudio_yaml_writer.format_value(2.0), "2")
		self.assertEqual(ffstudio_yaml_writer.format_value(0.75), "0.75")
		self.assertEqual(ffstudio_yaml_writer.format_value(0), "0")

	#============================================
	def test_yaml_quote(self) -> None:
		"""Ensure backslashes and quotes are escaped."""
		self.assertEqual(ffstudio_yaml_writer.yaml_quote("C:\\v\"x"), "\"C:\\\\v\\\"x\"")

	#============================================
	def test_written_yaml_loads(self) -> None:
		"""Ensure the writer output loads back into the same settings."""
		yaml_text = ffstudio_yaml_writer.build_project_yaml(
			video_file="clip.mp4",
			watermark_file="logo.png",
			opacity=0.5,
			x=-10,
			y=20,
			scale=1.25,
			start="00:01.5",
			end="12",
			speed=2.0,
			audio_mode='sync',
			aspect_ratio='9:16',
			resolution='1080p',
			batch=True,
			input_dir="C:\\videos",
			output_dir="marked",
			extension=".webm",
		)
		with tempfile.TemporaryDirectory() as temp_dir:
			yaml_path = os.path.join(temp_dir, "project.ffstudio.yaml")
			with open(yaml_path, 'w', encoding='utf-8') as handle:
				handle.write(yaml_text)
			config = SettingsLoader(yaml_path, strict=True).load()
		self.assertEqual(config.video_name, "clip.mp4")
		self.assertEqual(config.image_name, "logo.png")
		self.assertEqual(config.opacity, 0.5)
		self.assertEqual((config.x, config.y), (-10, 20))
		self.assertEqual(config.scale, 1.25)
		self.assertEqual(config.start_time, 1.5)
		self.assertEqual(config.end_time, 12.0)
		self.assertEqual(config.video_speed, 2.0)
		self.assertEqual(config.audio_mode, 'sync')
		self.assertEqual(config.aspect_ratio, '9:16')
		self.assertEqual(config.output_resolution, '1080p')
		self.assertTrue(config.is_batch_mode)
		self.assertEqual(config.input_path, "C:\\videos")
		self.assertEqual(config.output_path, "marked")
		self.assertEqual(config.file_extension, "webm")

#============================================

def main() -> None:
	"""Run the unit tests."""
	unittest.main()

#============================================

if __name__ == "__main__":
	main()
