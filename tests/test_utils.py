#!/usr/bin/env python3

"""
Pytest coverage for number and time helpers.
"""

# Standard Library
import os
import sys
from decimal import Decimal

# PIP3 modules
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from ffstudiolib.core import settings as settings_mod
from ffstudiolib.core import utils

#============================================

@pytest.mark.parametrize("value, expected", [
	(2, "2"),
	(2.0, "2"),
	(0.5, "0.5"),
	(0.1 + 0.2, "0.3"),
	(1.0 / 3.0, "0.333333"),
	(-4.25, "-4.25"),
	(0, "0"),
])
def test_format_number(value, expected: str) -> None:
	"""
	Ensure numbers print in their short form.
	"""
	assert utils.format_number(value) == expected

#============================================

def test_parse_timecode() -> None:
	"""
	Ensure seconds and timecodes parse to seconds.
	"""
	assert utils.parse_timecode(5) == Decimal(5)
	assert utils.parse_timecode("90.5") == Decimal("90.5")
	assert utils.parse_timecode("01:30") == Decimal(90)
	assert utils.parse_timecode("1:00:05.5") == Decimal("3605.5")
	with pytest.raises(RuntimeError):
		utils.parse_timecode("soon")
	with pytest.raises(RuntimeError):
		utils.parse_timecode(None)

#============================================

def test_path_joins() -> None:
	"""
	Ensure both separators join and skip empty parts.
	"""
	assert utils.join_windows_path(".", "done") == ".\\done"
	assert utils.join_posix_path("in", "", "out") == "in/out"

#============================================

def test_normalize_choice_policy() -> None:
	"""
	Ensure unknown choices fall back to original unless strict.
	"""
	choices = settings_mod.OUTPUT_RESOLUTIONS
	assert settings_mod.normalize_choice("720p", choices) == "720p"
	assert settings_mod.normalize_choice(" 480p ", choices) == "480p"
	assert settings_mod.normalize_choice(None, choices) == "original"
	assert settings_mod.normalize_choice("8k", choices) == "original"
	with pytest.raises(RuntimeError):
		settings_mod.normalize_choice("8k", choices, strict=True)

#============================================

def test_effective_duration() -> None:
	"""
	Ensure the trim window never goes negative.
	"""
	assert settings_mod.WatermarkSettings(start_time=5, end_time=15).effective_duration == 10
	assert settings_mod.WatermarkSettings(start_time=9, end_time=3).effective_duration == 0
