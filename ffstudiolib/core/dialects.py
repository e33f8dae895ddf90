#!/usr/bin/env python3

"""
Script emitters for single commands and batch folder scripts.

Each dialect renders the same invocation template; batch dialects wrap it
in directory setup, a glob loop, and a footer.
"""

from ffstudiolib.core import settings as settings_mod
from ffstudiolib.core import utils
from ffstudiolib.core.command import InvocationTemplate

INDENT = "    "

#============================================

class ScriptDialect():
	name = None
	extension = None

	#============================
	def render(self, template: InvocationTemplate,
		config: settings_mod.WatermarkSettings) -> str:
		lines = []
		lines.extend(self.render_setup(config))
		lines.extend(self.render_loop_header(config))
		lines.extend(self.render_per_file(template, config))
		lines.extend(self.render_footer(config))
		return "\n".join(lines)

	#============================
	def render_setup(self, config: settings_mod.WatermarkSettings) -> list:
		return []

	#============================
	def render_loop_header(self, config: settings_mod.WatermarkSettings) -> list:
		return []

	#============================
	def render_per_file(self, template: InvocationTemplate,
		config: settings_mod.WatermarkSettings) -> list:
		raise NotImplementedError

	#============================
	def render_footer(self, config: settings_mod.WatermarkSettings) -> list:
		return []

#============================================

class SingleCommandDialect(ScriptDialect):
	name = 'single'
	extension = '.txt'

	#============================
	def render_per_file(self, template: InvocationTemplate,
		config: settings_mod.WatermarkSettings) -> list:
		cmd = template.substitute(config.source_name, settings_mod.DEFAULT_OUTPUT_NAME)
		return [cmd]

#============================================

class BatchDialect(ScriptDialect):
	"""
	Base for dialects that loop over a folder into an output subfolder.
	"""

	#============================
	def output_dir(self, config: settings_mod.WatermarkSettings) -> str:
		raise NotImplementedError

#============================================

class WindowsBatchDialect(BatchDialect):
	name = 'windows'
	extension = '.bat'

	#============================
	def output_dir(self, config: settings_mod.WatermarkSettings) -> str:
		return utils.join_windows_path(config.input_path, config.output_path)

	#============================
	def render_setup(self, config: settings_mod.WatermarkSettings) -> list:
		out_dir = self.output_dir(config)
		return [
			"@echo off",
			f"if not exist \"{out_dir}\" mkdir \"{out_dir}\"",
			f"echo Processing {config.file_extension} files...",
		]

	#============================
	def render_loop_header(self, config: settings_mod.WatermarkSettings) -> list:
		pattern = utils.join_windows_path(config.input_path, f"*.{config.file_extension}")
		return [
			f"for %%f in (\"{pattern}\") do (",
			f"{INDENT}echo Processing: %%f",
		]

	#============================
	def render_per_file(self, template: InvocationTemplate,
		config: settings_mod.WatermarkSettings) -> list:
		# %%~nf is the loop file name without its extension
		out_file = utils.join_windows_path(self.output_dir(config),
			f"%%~nf.{config.file_extension}")
		return [INDENT + template.substitute("%%f", out_file)]

	#============================
	def render_footer(self, config: settings_mod.WatermarkSettings) -> list:
		return [")", "echo Done!", "pause"]

#============================================

class PosixShellDialect(BatchDialect):
	name = 'bash'
	extension = '.sh'

	#============================
	def output_dir(self, config: settings_mod.WatermarkSettings) -> str:
		return utils.join_posix_path(config.input_path, config.output_path)

	#============================
	def render_setup(self, config: settings_mod.WatermarkSettings) -> list:
		return [
			"#!/bin/bash",
			f"mkdir -p \"{self.output_dir(config)}\"",
			f"echo \"Processing {config.file_extension} files...\"",
		]

	#============================
	def render_loop_header(self, config: settings_mod.WatermarkSettings) -> list:
		return [
			f"for f in \"{config.input_path}\"/*.{config.file_extension}; do",
			# an unmatched glob stays a literal pattern
			f"{INDENT}[ -e \"$f\" ] || continue",
			f"{INDENT}filename=$(basename -- \"$f\")",
			f"{INDENT}base=\"${{filename%.*}}\"",
			f"{INDENT}echo \"Processing: $f\"",
		]

	#============================
	def render_per_file(self, template: InvocationTemplate,
		config: settings_mod.WatermarkSettings) -> list:
		out_file = utils.join_posix_path(self.output_dir(config),
			f"$base.{config.file_extension}")
		return [INDENT + template.substitute("$f", out_file)]

	#============================
	def render_footer(self, config: settings_mod.WatermarkSettings) -> list:
		return ["done", "echo \"Done!\""]

#============================================

DIALECTS = {
	'single': SingleCommandDialect,
	'windows': WindowsBatchDialect,
	'bash': PosixShellDialect,
}

# accepted spellings for the batch dialects
DIALECT_ALIASES = {
	'windows': 'windows',
	'bat': 'windows',
	'cmd': 'windows',
	'bash': 'bash',
	'sh': 'bash',
	'posix': 'bash',
	'single': 'single',
}

#============================================

def get_dialect(name: str) -> ScriptDialect:
	key = DIALECT_ALIASES.get(str(name).lower())
	if key is None:
		raise RuntimeError(f"unknown script dialect: {name}")
	return DIALECTS[key]()

#============================================

def dialect_for(config: settings_mod.WatermarkSettings, name: str) -> ScriptDialect:
	dialect = get_dialect(name)
	if not config.is_batch_mode:
		return SingleCommandDialect()
	if dialect.name == 'single':
		raise RuntimeError("batch mode needs a windows or bash dialect")
	return dialect
