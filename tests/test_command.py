#!/usr/bin/env python3

"""
Unit tests for trim and audio argument assembly.
"""

# Standard Library
import os
import sys
import unittest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from ffstudiolib.core import command
from ffstudiolib.core.settings import WatermarkSettings

#============================================

class TrimArgsTest(unittest.TestCase):
	#============================================
	def test_full_length_has_no_trim(self) -> None:
		"""Ensure a zero trim window reads the whole source."""
		template = command.assemble_command(WatermarkSettings(start_time=0, end_time=0))
		self.assertNotIn("-ss", template.text)
		self.assertNotIn("-t ", template.text)

	#============================================
	def test_start_and_duration(self) -> None:
		"""Ensure start 5 and end 15 give -ss 5 and -t 10."""
		config = WatermarkSettings(start_time=5, end_time=15)
		self.assertEqual(command.trim_args(config), ["-ss 5", "-t 10"])
		self.assertTrue(command.assemble_command(config).text.startswith(
			"ffmpeg -ss 5 -t 10 -i \"%INPUT%\""))

	#============================================
	def test_end_before_start_reads_to_end(self) -> None:
		"""Ensure an inverted window keeps the start offset only."""
		config = WatermarkSettings(start_time=20, end_time=10)
		self.assertEqual(command.trim_args(config), ["-ss 20"])

	#============================================
	def test_fractional_times(self) -> None:
		"""Ensure fractional seconds keep a short decimal form."""
		config = WatermarkSettings(start_time=1.5, end_time=4.25)
		self.assertEqual(command.trim_args(config), ["-ss 1.5", "-t 2.75"])

#============================================

class AudioArgsTest(unittest.TestCase):
	#============================================
	def test_normal_speed_copies_audio(self) -> None:
		"""Ensure unchanged speed copies and maps audio for either mode."""
		for mode in ('original', 'sync'):
			config = WatermarkSettings(audio_mode=mode)
			self.assertEqual(command.audio_args(config), ["-map 0:a", "-c:a copy"])

	#============================================
	def test_speed_with_original_audio(self) -> None:
		"""Ensure original audio mode copies audio even when retimed."""
		config = WatermarkSettings(video_speed=2, audio_mode='original')
		text = command.assemble_command(config).text
		self.assertIn("-map 0:a -c:a copy", text)
		self.assertNotIn("atempo", text)

	#============================================
	def test_speed_with_sync_audio(self) -> None:
		"""Ensure sync mode uses atempo and leaves out the audio map."""
		config = WatermarkSettings(video_speed=2, audio_mode='sync')
		text = command.assemble_command(config).text
		self.assertIn("-filter:a \"atempo=2\"", text)
		self.assertNotIn("-map 0:a", text)

#============================================

class TemplateTest(unittest.TestCase):
	#============================================
	def test_flag_order(self) -> None:
		"""Ensure the fixed flag order and the two placeholders."""
		config = WatermarkSettings(start_time=2, end_time=8, video_speed=1.5,
			audio_mode='sync', output_resolution='1080p', image_name="logo.png")
		text = command.assemble_command(config).text
		expected = (
			"ffmpeg -ss 2 -t 6 -i \"%INPUT%\" -i \"logo.png\" -filter_complex "
			"\"[1]format=rgba,colorchannelmixer=aa=0.8,scale=iw*0.5:-1[wm];"
			"[0][wm]overlay=50:50[base];[base]setpts=PTS/1.5[speeded];"
			"[speeded]scale=-1:1080[finalv]\" -map \"[finalv]\" "
			"-filter:a \"atempo=1.5\" \"%OUTPUT%\""
		)
		self.assertEqual(text, expected)
		self.assertEqual(text.count(command.INPUT_TOKEN), 1)
		self.assertEqual(text.count(command.OUTPUT_TOKEN), 1)
		self.assertNotIn("  ", text)

	#============================================
	def test_substitute(self) -> None:
		"""Ensure substitution replaces only the placeholders."""
		template = command.assemble_command(WatermarkSettings())
		cmd = template.substitute("a.mp4", "b.mp4")
		self.assertIn("-i \"a.mp4\"", cmd)
		self.assertTrue(cmd.endswith("\"b.mp4\""))
		self.assertNotIn("%", cmd)

#============================================

def main() -> None:
	"""Run the unit tests."""
	unittest.main()

#============================================

if __name__ == "__main__":
	main()
