#!/usr/bin/env python3

import logging
import os
import stat
from ffstudiolib.core import dialects

logger = logging.getLogger(__name__)

SCRIPT_BASENAME = "ffstudio_batch"
COMMAND_BASENAME = "ffstudio_command"

#============================================

def script_filename(is_batch_mode: bool, dialect: str) -> str:
	if not is_batch_mode:
		return COMMAND_BASENAME + dialects.SingleCommandDialect.extension
	emitter = dialects.get_dialect(dialect)
	if not isinstance(emitter, dialects.BatchDialect):
		raise RuntimeError(f"no batch script for dialect: {dialect}")
	return SCRIPT_BASENAME + emitter.extension

#============================================

def write_script(text: str, output_file: str, dialect: str = None) -> str:
	"""
	Write compiled text to disk byte for byte.

	Args:
		text: Compiled command or script.
		output_file: Destination path.
		dialect: Script dialect; bash scripts get the executable bit.

	Returns:
		str: The path written.
	"""
	out_dir = os.path.dirname(output_file)
	if out_dir != "" and not os.path.isdir(out_dir):
		os.makedirs(out_dir)
	with open(output_file, 'w', encoding='utf-8', newline='') as handle:
		handle.write(text)
	if dialect == 'bash' or output_file.endswith('.sh'):
		mode = os.stat(output_file).st_mode
		os.chmod(output_file, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
	logger.debug("wrote %d bytes to %s", len(text.encode('utf-8')), output_file)
	return output_file

#============================================

class ScriptExporter():
	def __init__(self, project, output_file: str = None):
		self.project = project
		self.output_file = output_file or self._default_output_path()

	#============================
	def _default_output_path(self) -> str:
		base_dir = os.path.dirname(os.path.abspath(self.project.yaml_file))
		return os.path.join(base_dir, self.project.default_filename())

	#============================
	def export(self) -> str:
		text = self.project.compile()
		dialect = self.project.dialect if self.project.settings.is_batch_mode else None
		return write_script(text, self.output_file, dialect)
