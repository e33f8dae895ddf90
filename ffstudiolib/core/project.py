#!/usr/bin/env python3

import functools
from ffstudiolib.core import command
from ffstudiolib.core import dialects
from ffstudiolib.core import filtergraph
from ffstudiolib.core import settings as settings_mod
from ffstudiolib.core import utils
from ffstudiolib.core.loader import SettingsLoader
from ffstudiolib.exporters import script_file

#============================================

@functools.lru_cache(maxsize=64)
def compile_settings(config: settings_mod.WatermarkSettings,
	dialect: str = 'windows') -> str:
	"""
	Compile one settings value into a command line or batch script.

	Pure: the same settings and dialect always give the same text.
	"""
	graph = filtergraph.compile_filter_graph(config)
	template = command.assemble_command(config, graph)
	emitter = dialects.dialect_for(config, dialect)
	return emitter.render(template, config)

#============================================

def compile_plan(config: settings_mod.WatermarkSettings) -> dict:
	graph = filtergraph.compile_filter_graph(config)
	template = command.assemble_command(config, graph)
	stages = []
	for stage in graph.stages:
		stages.append({
			'inputs': list(stage.inputs),
			'operation': stage.operation,
			'output': stage.output,
		})
	return {
		'stages': stages,
		'filter_complex': graph.expression,
		'active_label': graph.active_label,
		'template': template.text,
	}

#============================================

def summarize_settings(config: settings_mod.WatermarkSettings) -> str:
	mode = "Batch Mode" if config.is_batch_mode else "Single Mode"
	speed = utils.format_number(config.video_speed)
	return (f"[{mode}] Processing {config.file_extension} files. "
		f"Speed: {speed}x. Resolution: {config.output_resolution}.")

#============================================

class FfstudioProject():
	def __init__(self, yaml_file: str, dialect: str = 'windows',
		strict: bool = False, batch_override: bool = None):
		loader = SettingsLoader(yaml_file, strict=strict,
			batch_override=batch_override)
		self.yaml_file = yaml_file
		self.dialect = dialects.get_dialect(dialect).name
		self.settings = loader.load()

	#============================
	def compile(self) -> str:
		return compile_settings(self.settings, self.dialect)

	#============================
	def plan(self) -> dict:
		return compile_plan(self.settings)

	#============================
	def summary(self) -> str:
		return summarize_settings(self.settings)

	#============================
	def default_filename(self) -> str:
		return script_file.script_filename(self.settings.is_batch_mode, self.dialect)

	#============================
	def save(self, output_file: str = None) -> str:
		exporter = script_file.ScriptExporter(self, output_file=output_file)
		return exporter.export()
