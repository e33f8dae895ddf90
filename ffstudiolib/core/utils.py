#!/usr/bin/env python3

import os
from decimal import Decimal, InvalidOperation

QUIET_MODE = False

#============================================

def set_quiet_mode(enabled: bool) -> None:
	global QUIET_MODE
	QUIET_MODE = bool(enabled)

#============================================

def is_quiet_mode() -> bool:
	return QUIET_MODE

#============================================

def report(message: str) -> None:
	if is_quiet_mode():
		return
	print(message)

#============================================

def parse_timecode(raw_time) -> Decimal:
	if raw_time is None:
		raise RuntimeError("time value is required")
	if isinstance(raw_time, bool):
		raise RuntimeError("time values must be int, float, or timecode string")
	if isinstance(raw_time, int):
		return Decimal(raw_time)
	if isinstance(raw_time, float):
		return Decimal(str(raw_time))
	if isinstance(raw_time, str):
		value = raw_time.strip()
		if value == "":
			raise RuntimeError("time value is empty")
		try:
			if ':' not in value:
				return Decimal(value)
			parts = value.split(':')
			if len(parts) > 3:
				raise RuntimeError(f"invalid timecode: {raw_time}")
			seconds = Decimal(parts.pop())
			minutes = Decimal(parts.pop())
			hours = Decimal(0)
			if len(parts) > 0:
				hours = Decimal(parts.pop())
		except InvalidOperation as exc:
			raise RuntimeError(f"invalid timecode: {raw_time}") from exc
		return hours * Decimal(3600) + minutes * Decimal(60) + seconds
	raise RuntimeError("time values must be int, float, or timecode string")

#============================================

def format_number(value) -> str:
	"""
	Format a number the short way ffmpeg arguments expect.

	Integral values drop the decimal point (2.0 -> "2"), everything else is
	rounded to six places with trailing zeros stripped (0.50 -> "0.5").
	"""
	number = float(value)
	if number.is_integer():
		return str(int(number))
	text = f"{number:.6f}"
	text = text.rstrip('0').rstrip('.')
	if text in ("", "-0"):
		text = "0"
	return text

#============================================

def join_windows_path(*parts) -> str:
	return "\\".join(part for part in parts if part != "")

#============================================

def join_posix_path(*parts) -> str:
	return "/".join(part for part in parts if part != "")

#============================================

def ensure_file_exists(filepath: str) -> None:
	if not os.path.exists(filepath):
		raise RuntimeError(f"file not found: {filepath}")
	return
