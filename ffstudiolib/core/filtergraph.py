#!/usr/bin/env python3

from dataclasses import dataclass, field
from ffstudiolib.core import settings as settings_mod
from ffstudiolib.core import utils

#============================================

@dataclass(frozen=True)
class FilterStage():
	inputs: tuple
	operation: str
	output: str

	#============================
	def render(self) -> str:
		labels = "".join(f"[{label}]" for label in self.inputs)
		return f"{labels}{self.operation}[{self.output}]"

#============================================

@dataclass
class FilterGraph():
	stages: list = field(default_factory=list)
	active_label: str = None

	#============================
	def add_stage(self, operation: str, output: str, inputs: tuple = None) -> FilterStage:
		if inputs is None:
			inputs = (self.active_label,)
		stage = FilterStage(tuple(inputs), operation, output)
		self.stages.append(stage)
		self.active_label = output
		return stage

	#============================
	@property
	def expression(self) -> str:
		return ";".join(stage.render() for stage in self.stages)

	#============================
	@property
	def map_label(self) -> str:
		return f"[{self.active_label}]"

#============================================

def watermark_operation(opacity: float, scale: float) -> str:
	operation = f"format=rgba,colorchannelmixer=aa={utils.format_number(opacity)}"
	if scale != 1:
		operation += f",scale=iw*{utils.format_number(scale)}:-1"
	return operation

#============================================

def crop_operation(ratio_expr: str) -> str:
	divisor = ratio_expr
	if '/' in ratio_expr:
		divisor = f"({ratio_expr})"
	width = f"'min(iw,ih*{ratio_expr})'"
	height = f"'min(ih,iw/{divisor})'"
	return f"crop={width}:{height}:'(iw-ow)/2':'(ih-oh)/2'"

#============================================

def compile_filter_graph(config: settings_mod.WatermarkSettings) -> FilterGraph:
	"""
	Build the straight-line filter chain for one settings value.

	Optional stages always consume the current active label, so a skipped
	stage never leaves a dangling reference downstream.
	"""
	graph = FilterGraph()
	graph.add_stage(watermark_operation(config.opacity, config.scale), 'wm',
		inputs=('1',))
	graph.add_stage(f"overlay={int(config.x)}:{int(config.y)}", 'base',
		inputs=('0', 'wm'))
	if config.video_speed != 1:
		graph.add_stage(f"setpts=PTS/{utils.format_number(config.video_speed)}",
			'speeded')
	ratio_expr = settings_mod.ASPECT_RATIO_EXPRESSIONS.get(config.aspect_ratio)
	if ratio_expr is not None:
		graph.add_stage(crop_operation(ratio_expr), 'cropped')
	height = settings_mod.OUTPUT_HEIGHTS.get(config.output_resolution)
	if height is not None:
		graph.add_stage(f"scale=-1:{height}", 'finalv')
	return graph
