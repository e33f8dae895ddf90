#!/usr/bin/env python3

"""
Immutable watermark/edit settings consumed by the command compiler.
"""

# Standard Library
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

#============================================

ORIGINAL = 'original'

AUDIO_MODES = ('original', 'sync')
ASPECT_RATIOS = ('original', '16:9', '9:16', '1:1', '4:3')
OUTPUT_RESOLUTIONS = ('original', '1080p', '720p', '480p')

# crop ratio expressions, width over height
ASPECT_RATIO_EXPRESSIONS = {
	'16:9': '16/9',
	'9:16': '9/16',
	'1:1': '1',
	'4:3': '4/3',
}

OUTPUT_HEIGHTS = {
	'1080p': 1080,
	'720p': 720,
	'480p': 480,
}

DEFAULT_VIDEO_NAME = 'input.mp4'
DEFAULT_IMAGE_NAME = 'watermark.png'
DEFAULT_OUTPUT_NAME = 'output.mp4'

#============================================

@dataclass(frozen=True)
class WatermarkSettings():
	opacity: float = 0.8
	x: int = 50
	y: int = 50
	scale: float = 0.5
	start_time: float = 0.0
	end_time: float = 0.0
	video_speed: float = 1.0
	audio_mode: str = 'original'
	aspect_ratio: str = 'original'
	output_resolution: str = 'original'
	is_batch_mode: bool = False
	input_path: str = '.'
	output_path: str = 'processed'
	file_extension: str = 'mp4'
	video_name: str = ''
	image_name: str = ''

	#============================
	@property
	def effective_duration(self) -> float:
		return max(0.0, self.end_time - self.start_time)

	#============================
	@property
	def source_name(self) -> str:
		return self.video_name or DEFAULT_VIDEO_NAME

	#============================
	@property
	def watermark_name(self) -> str:
		return self.image_name or DEFAULT_IMAGE_NAME

#============================================

def normalize_choice(value, choices: tuple, field_name: str = 'value',
	strict: bool = False) -> str:
	"""
	Map a choice value onto one of the allowed strings.

	Unknown values collapse to 'original' so the matching stage is simply
	left out of the filter graph. With strict set they raise instead.
	"""
	text = str(value).strip() if value is not None else ORIGINAL
	if text in choices:
		return text
	if strict:
		raise RuntimeError(f"{field_name} must be one of {', '.join(choices)}, got {value!r}")
	logger.warning("unknown %s %r, using %s", field_name, value, ORIGINAL)
	return ORIGINAL
