#!/usr/bin/env python3

import logging
import os
import yaml
from ffstudiolib.core import settings as settings_mod
from ffstudiolib.core import utils

logger = logging.getLogger(__name__)

SECTIONS = ('source', 'watermark', 'trim', 'speed', 'frame', 'batch')

#============================================

class SettingsLoader():
	def __init__(self, yaml_file: str, strict: bool = False,
		batch_override: bool = None):
		self.yaml_file = yaml_file
		self.strict = strict
		self.batch_override = batch_override
		self.defaults = settings_mod.WatermarkSettings()

	#============================
	def load(self) -> settings_mod.WatermarkSettings:
		data = self._load_yaml()
		return self.parse(data)

	#============================
	def parse(self, data: dict) -> settings_mod.WatermarkSettings:
		self._validate_required_keys(data)
		sections = {}
		for name in SECTIONS:
			section = data.get(name)
			if section is None:
				section = {}
			if not isinstance(section, dict):
				raise RuntimeError(f"{name} must be a mapping")
			sections[name] = section
		values = {}
		values.update(self._parse_source(sections['source']))
		values.update(self._parse_watermark(sections['watermark']))
		values.update(self._parse_trim(sections['trim']))
		values.update(self._parse_speed(sections['speed']))
		values.update(self._parse_frame(sections['frame']))
		values.update(self._parse_batch(sections['batch']))
		if self.batch_override is not None:
			values['is_batch_mode'] = bool(self.batch_override)
		return settings_mod.WatermarkSettings(**values)

	#============================
	def _load_yaml(self) -> dict:
		utils.ensure_file_exists(self.yaml_file)
		file_size = os.path.getsize(self.yaml_file)
		if file_size > 10 ** 6:
			raise RuntimeError("yaml file is larger than 1MB")
		with open(self.yaml_file, 'r') as data_file:
			data = yaml.safe_load(data_file)
		if data is None:
			data = {}
		if not isinstance(data, dict):
			raise RuntimeError("project yaml must be a mapping at the top level")
		return data

	#============================
	def _validate_required_keys(self, data: dict) -> None:
		version = data.get('ffstudio', 1)
		if version != 1:
			raise RuntimeError("ffstudio must be set to 1")
		unknown = [key for key in data if key not in SECTIONS and key != 'ffstudio']
		if len(unknown) > 0:
			if self.strict:
				raise RuntimeError(f"unknown keys: {', '.join(str(k) for k in unknown)}")
			logger.warning("ignoring unknown keys: %s", ", ".join(str(k) for k in unknown))

	#============================
	def _parse_source(self, source: dict) -> dict:
		video_file = source.get('file')
		if video_file is None:
			return {}
		return {'video_name': str(video_file)}

	#============================
	def _parse_watermark(self, watermark: dict) -> dict:
		values = {}
		if watermark.get('file') is not None:
			values['image_name'] = str(watermark['file'])
		opacity = self._parse_float(watermark.get('opacity'), self.defaults.opacity,
			'watermark.opacity')
		values['opacity'] = min(1.0, max(0.0, opacity))
		values['x'] = self._parse_int(watermark.get('x'), self.defaults.x, 'watermark.x')
		values['y'] = self._parse_int(watermark.get('y'), self.defaults.y, 'watermark.y')
		values['scale'] = self._parse_positive(watermark.get('scale'),
			self.defaults.scale, 'watermark.scale')
		return values

	#============================
	def _parse_trim(self, trim: dict) -> dict:
		start_time = self._parse_time(trim.get('start'), self.defaults.start_time,
			'trim.start')
		end_time = self._parse_time(trim.get('end'), self.defaults.end_time,
			'trim.end')
		if start_time < 0:
			start_time = 0.0
		if end_time > 0 and end_time <= start_time:
			logger.warning("trim.end %s is not after trim.start %s, reading to the end",
				end_time, start_time)
		return {'start_time': start_time, 'end_time': end_time}

	#============================
	def _parse_speed(self, speed: dict) -> dict:
		video_speed = self._parse_positive(speed.get('video'),
			self.defaults.video_speed, 'speed.video')
		audio_mode = settings_mod.normalize_choice(speed.get('audio'),
			settings_mod.AUDIO_MODES, 'speed.audio', strict=self.strict)
		return {'video_speed': video_speed, 'audio_mode': audio_mode}

	#============================
	def _parse_frame(self, frame: dict) -> dict:
		raw_ratio = frame.get('aspect_ratio')
		if isinstance(raw_ratio, int) and not isinstance(raw_ratio, bool):
			# yaml 1.1 reads an unquoted 16:9 as the base 60 integer 969
			(width, height) = divmod(raw_ratio, 60)
			raw_ratio = f"{width}:{height}"
		aspect_ratio = settings_mod.normalize_choice(raw_ratio,
			settings_mod.ASPECT_RATIOS, 'frame.aspect_ratio', strict=self.strict)
		resolution = settings_mod.normalize_choice(frame.get('resolution'),
			settings_mod.OUTPUT_RESOLUTIONS, 'frame.resolution', strict=self.strict)
		return {'aspect_ratio': aspect_ratio, 'output_resolution': resolution}

	#============================
	def _parse_batch(self, batch: dict) -> dict:
		values = {
			'is_batch_mode': self._parse_bool(batch.get('enabled'),
				self.defaults.is_batch_mode, 'batch.enabled'),
			'input_path': self._parse_text(batch.get('input_dir'),
				self.defaults.input_path, 'batch.input_dir'),
			'output_path': self._parse_text(batch.get('output_dir'),
				self.defaults.output_path, 'batch.output_dir'),
		}
		extension = self._parse_text(batch.get('extension'),
			self.defaults.file_extension, 'batch.extension')
		extension = extension.lstrip('.')
		if extension == "":
			if self.strict:
				raise RuntimeError("batch.extension must not be empty")
			extension = self.defaults.file_extension
		values['file_extension'] = extension
		return values

	#============================
	def _parse_bool(self, raw_value, default: bool, field_name: str) -> bool:
		if raw_value is None:
			return default
		if isinstance(raw_value, bool):
			return raw_value
		if self.strict:
			raise RuntimeError(f"{field_name} must be true or false, got {raw_value!r}")
		logger.warning("%s %r is not true or false, using %s", field_name,
			raw_value, default)
		return default

	#============================
	def _parse_text(self, raw_value, default: str, field_name: str) -> str:
		if raw_value is None:
			return default
		if isinstance(raw_value, (dict, list, bool)):
			if self.strict:
				raise RuntimeError(f"{field_name} must be a string, got {raw_value!r}")
			logger.warning("%s %r is not a string, using %s", field_name,
				raw_value, default)
			return default
		text = str(raw_value).strip()
		if text == "":
			return default
		return text

	#============================
	def _parse_float(self, raw_value, default: float, field_name: str) -> float:
		if raw_value is None:
			return default
		try:
			if isinstance(raw_value, bool):
				raise ValueError("boolean")
			return float(raw_value)
		except (TypeError, ValueError):
			if self.strict:
				raise RuntimeError(f"{field_name} must be a number, got {raw_value!r}")
			logger.warning("%s %r is not a number, using %s", field_name, raw_value, default)
			return default

	#============================
	def _parse_int(self, raw_value, default: int, field_name: str) -> int:
		value = self._parse_float(raw_value, float(default), field_name)
		return int(round(value))

	#============================
	def _parse_positive(self, raw_value, default: float, field_name: str) -> float:
		value = self._parse_float(raw_value, default, field_name)
		if value <= 0:
			if self.strict:
				raise RuntimeError(f"{field_name} must be positive")
			logger.warning("%s must be positive, using 1", field_name)
			return 1.0
		return value

	#============================
	def _parse_time(self, raw_value, default: float, field_name: str) -> float:
		if raw_value is None:
			return default
		try:
			return float(utils.parse_timecode(raw_value))
		except RuntimeError:
			if self.strict:
				raise
			logger.warning("%s %r is not a time value, using %s", field_name,
				raw_value, default)
			return default
