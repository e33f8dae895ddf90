#!/usr/bin/env python3

from dataclasses import dataclass
from ffstudiolib.core import filtergraph
from ffstudiolib.core import settings as settings_mod
from ffstudiolib.core import utils

INPUT_TOKEN = "%INPUT%"
OUTPUT_TOKEN = "%OUTPUT%"
FFMPEG_TOOL = "ffmpeg"

#============================================

@dataclass(frozen=True)
class InvocationTemplate():
	text: str

	#============================
	def substitute(self, input_value: str, output_value: str) -> str:
		cmd = self.text.replace(INPUT_TOKEN, input_value, 1)
		cmd = cmd.replace(OUTPUT_TOKEN, output_value, 1)
		return cmd

#============================================

def trim_args(config: settings_mod.WatermarkSettings) -> list:
	args = []
	if config.start_time > 0:
		args.append(f"-ss {utils.format_number(config.start_time)}")
	# end <= start reads the source to its natural end
	duration = config.effective_duration
	if duration > 0:
		args.append(f"-t {utils.format_number(duration)}")
	return args

#============================================

def audio_args(config: settings_mod.WatermarkSettings) -> list:
	if config.video_speed != 1 and config.audio_mode == 'sync':
		# atempo binds the audio stream itself, no explicit map
		return [f"-filter:a \"atempo={utils.format_number(config.video_speed)}\""]
	# speed changes with audio_mode original leave the audio at its own pace
	return ["-map 0:a", "-c:a copy"]

#============================================

def assemble_command(config: settings_mod.WatermarkSettings,
	graph: filtergraph.FilterGraph = None) -> InvocationTemplate:
	if graph is None:
		graph = filtergraph.compile_filter_graph(config)
	parts = [FFMPEG_TOOL]
	parts.extend(trim_args(config))
	parts.append(f"-i \"{INPUT_TOKEN}\"")
	parts.append(f"-i \"{config.watermark_name}\"")
	parts.append(f"-filter_complex \"{graph.expression}\"")
	parts.append(f"-map \"{graph.map_label}\"")
	parts.extend(audio_args(config))
	parts.append(f"\"{OUTPUT_TOKEN}\"")
	return InvocationTemplate(" ".join(parts))
