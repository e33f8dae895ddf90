#!/usr/bin/env python3

"""
Textual TUI for building ffmpeg watermark commands and batch scripts.
"""

# Standard Library
import argparse
import dataclasses
import os
import re
import sys
import threading
import time

script_dir = os.path.dirname(os.path.abspath(__file__))
repo_root = script_dir
if os.path.basename(script_dir) == "tools":
	repo_root = os.path.dirname(script_dir)
if repo_root not in sys.path:
	sys.path.insert(0, repo_root)

# PIP3 modules
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, RichLog, Static
from rich.text import Text

# local repo modules
from ffstudiolib import assistant
from ffstudiolib.core import project as project_mod
from ffstudiolib.core import utils
from ffstudiolib.core.loader import SettingsLoader
from ffstudiolib.exporters import script_file

#============================================

NORD_COLORS = {
	'background': "#2E3440",
	'foreground': "#D8DEE9",
	'dim': "#4C566A",
	'header': "#88C0D0",
	'command': "#ECEFF4",
	'flags': "#81A1C1",
	'numbers': "#B48EAD",
	'paths': "#A3BE8C",
	'strings': "#EBCB8B",
	'error': "#BF616A",
}

GREETING = ("Hi! I can help you customize your FFmpeg command. Ask me things like "
	"\"How do I make the watermark rotate?\" or \"How do I crop the video?\"")

#============================================

def parse_args():
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="ffstudio TUI")
	parser.add_argument('-y', '--yaml', dest='yamlfile', required=True,
		help='project yaml file with watermark, trim, speed, frame and batch settings')
	parser.add_argument('-d', '--dialect', dest='dialect', default='windows',
		choices=('windows', 'bash'),
		help='batch script dialect')
	parser.add_argument('-s', '--strict', dest='strict', action='store_true',
		help='reject unknown or malformed settings instead of falling back')
	parser.add_argument('-D', '--debug', dest='debug_log', action='store_true',
		help='write debug log to ffstudio_tui.log in the current directory')
	args = parser.parse_args()
	return args

#============================================

class FfstudioTuiApp(App):
	BINDINGS = [
		("ctrl+q", "quit", "Quit"),
		("ctrl+b", "toggle_batch", "Batch"),
		("ctrl+t", "toggle_dialect", "Dialect"),
		("ctrl+s", "save", "Save"),
		("ctrl+r", "reload", "Reload"),
	]

	CSS = """
	#root {
		height: 1fr;
	}

	#top_row {
		height: 30%;
		min-height: 8;
	}

	#left_panel {
		width: 40%;
		height: 1fr;
		border: solid gray;
	}

	#right_panel {
		width: 60%;
		height: 1fr;
		border: solid gray;
	}

	#settings_title {
		height: 1;
		color: #88C0D0;
	}

	#settings_info {
		height: 1fr;
	}

	#project_title {
		height: 1;
		color: #88C0D0;
	}

	#project_info {
		height: 1fr;
	}

	#footer_note {
		height: 1;
		color: #4C566A;
	}

	#command {
		height: 1fr;
		border: solid gray;
	}

	#chat {
		height: 12;
		border: solid gray;
	}
	"""

	def __init__(self, yaml_file: str, dialect: str = 'windows',
		strict: bool = False, debug_log: bool = False):
		super().__init__()
		self.yaml_file = yaml_file
		self.dialect = dialect
		self.strict = strict
		self.settings = None
		self.compiled_text = ""
		self.error_text = None
		self.saved_file = None
		self.settings_widget = None
		self.project_widget = None
		self.command_widget = None
		self.chat_widget = None
		self.assistant = assistant.GeminiAssistant()
		self.command_styles = self._build_command_styles()
		self.debug_mode = debug_log
		self.log_path = None
		self.log_lock = threading.Lock()
		if self.debug_mode:
			self.log_path = os.path.join(os.getcwd(), "ffstudio_tui.log")
			self._reset_log()
			self._write_log(f"debug log: {self.log_path}")

	#============================
	def compose(self) -> ComposeResult:
		yield Static("FFSTUDIO TUI", id="header")
		with Vertical(id="root"):
			with Horizontal(id="top_row"):
				with Vertical(id="left_panel"):
					yield Static("Settings", id="settings_title")
					yield Static("", id="settings_info")
					yield Static("^B batch  ^T dialect  ^S save  ^R reload  ^Q quit",
						id="footer_note")
				with Vertical(id="right_panel"):
					yield Static("Project", id="project_title")
					yield Static("", id="project_info")
			yield RichLog(id="command", wrap=True, highlight=False)
			yield RichLog(id="chat", wrap=True, highlight=False)
			yield Input(placeholder="Ask about filters...", id="question")

	#============================
	def on_mount(self) -> None:
		self.settings_widget = self.query_one("#settings_info", Static)
		self.project_widget = self.query_one("#project_info", Static)
		self.command_widget = self.query_one("#command", RichLog)
		self.chat_widget = self.query_one("#chat", RichLog)
		self.chat_widget.write(Text(GREETING, style=NORD_COLORS['foreground']))
		self._load_settings()
		self._refresh()

	#============================
	def _load_settings(self) -> None:
		try:
			loader = SettingsLoader(self.yaml_file, strict=self.strict)
			self.settings = loader.load()
			self.error_text = None
		except RuntimeError as exc:
			self.error_text = str(exc)
			self._write_log(f"load error: {exc}")

	#============================
	def _refresh(self) -> None:
		if self.settings is not None:
			self.compiled_text = project_mod.compile_settings(self.settings, self.dialect)
		self._update_settings_info()
		self._update_project_info()
		self._update_command()

	#============================
	def action_toggle_batch(self) -> None:
		if self.settings is None:
			return
		self.settings = dataclasses.replace(self.settings,
			is_batch_mode=not self.settings.is_batch_mode)
		self._write_log(f"batch mode: {self.settings.is_batch_mode}")
		self._refresh()

	#============================
	def action_toggle_dialect(self) -> None:
		self.dialect = 'bash' if self.dialect == 'windows' else 'windows'
		self._write_log(f"dialect: {self.dialect}")
		self._refresh()

	#============================
	def action_reload(self) -> None:
		self._load_settings()
		self._refresh()

	#============================
	def action_save(self) -> None:
		if self.settings is None:
			return
		filename = script_file.script_filename(self.settings.is_batch_mode, self.dialect)
		base_dir = os.path.dirname(os.path.abspath(self.yaml_file))
		output_file = os.path.join(base_dir, filename)
		dialect = self.dialect if self.settings.is_batch_mode else None
		self.saved_file = script_file.write_script(self.compiled_text, output_file, dialect)
		self.chat_widget.write(Text(f"saved: {self.saved_file}", style=NORD_COLORS['paths']))
		self._write_log(f"saved: {self.saved_file}")
		self._update_project_info()

	#============================
	def on_input_submitted(self, event: Input.Submitted) -> None:
		question = event.value.strip()
		event.input.value = ""
		if question == "" or self.settings is None:
			return
		context = assistant.build_context(self.settings)
		self.chat_widget.write(Text(f"you: {question}", style=NORD_COLORS['command']))
		self.chat_widget.write(Text("Generating response...", style=NORD_COLORS['dim']))
		self._write_log(f"ask [{context}]: {question}")
		thread = threading.Thread(target=self._ask_worker, args=(context, question),
			daemon=True)
		thread.start()

	#============================
	def _ask_worker(self, context: str, question: str) -> None:
		answer = assistant.answer_question(self.assistant, context, question)
		self.call_from_thread(self._show_answer, context, answer)

	#============================
	def _show_answer(self, asked_context: str, answer: str) -> None:
		current_context = asked_context
		if self.settings is not None:
			current_context = assistant.build_context(self.settings)
		text = assistant.label_answer(answer, asked_context, current_context)
		self.chat_widget.write(Text(f"gemini: {text}", style=NORD_COLORS['foreground']))
		self._write_log(f"answer: {text}")

	#============================
	def _write_log(self, message: str) -> None:
		if not self.debug_mode or self.log_path is None:
			return
		timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
		line = f"[{timestamp}] {message}\n"
		with self.log_lock:
			with open(self.log_path, "a", encoding="utf-8") as handle:
				handle.write(line)

	#============================
	def _reset_log(self) -> None:
		if not self.debug_mode or self.log_path is None:
			return
		with self.log_lock:
			with open(self.log_path, "w", encoding="utf-8"):
				return

	#============================
	def _update_settings_info(self) -> None:
		if self.settings_widget is None:
			return
		info = Text()
		if self.settings is None:
			info.append("no settings loaded", style=NORD_COLORS['dim'])
			self.settings_widget.update(info)
			return
		config = self.settings
		mode = "batch" if config.is_batch_mode else "single"
		rows = [
			("Mode", mode),
			("Opacity", utils.format_number(config.opacity)),
			("Position", f"{config.x}, {config.y}"),
			("Scale", utils.format_number(config.scale)),
			("Trim", f"{utils.format_number(config.start_time)}s - "
				f"{utils.format_number(config.end_time)}s"),
			("Speed", f"{utils.format_number(config.video_speed)}x ({config.audio_mode} audio)"),
			("Frame", f"{config.aspect_ratio} / {config.output_resolution}"),
		]
		for index, (label, value) in enumerate(rows):
			if index > 0:
				info.append("\n")
			info.append(f"{label}: ", style=NORD_COLORS['dim'])
			info.append(value, style=NORD_COLORS['numbers'])
		self.settings_widget.update(info)

	#============================
	def _update_project_info(self) -> None:
		if self.project_widget is None:
			return
		project = Text()
		project.append("YAML: ", style=NORD_COLORS['dim'])
		project.append(self.yaml_file, style=NORD_COLORS['paths'])
		project.append("\n")
		project.append("Dialect: ", style=NORD_COLORS['dim'])
		project.append(self.dialect, style=NORD_COLORS['foreground'])
		if self.settings is not None:
			project.append("\n")
			project.append("Folder: ", style=NORD_COLORS['dim'])
			folder = f"{self.settings.input_path} -> {self.settings.output_path}"
			project.append(folder, style=NORD_COLORS['paths'])
			project.append("\n")
			project.append("Extension: ", style=NORD_COLORS['dim'])
			project.append(self.settings.file_extension, style=NORD_COLORS['strings'])
		saved_value = self.saved_file or "N/A"
		project.append("\n")
		project.append("Saved: ", style=NORD_COLORS['dim'])
		saved_style = NORD_COLORS['paths']
		if saved_value == "N/A":
			saved_style = NORD_COLORS['dim']
		project.append(saved_value, style=saved_style)
		if self.debug_mode and self.log_path is not None:
			project.append("\n")
			project.append("Debug log: ", style=NORD_COLORS['dim'])
			project.append(self.log_path, style=NORD_COLORS['paths'])
		self.project_widget.update(project)

	#============================
	def _update_command(self) -> None:
		if self.command_widget is None:
			return
		self.command_widget.clear()
		if self.error_text is not None:
			self.command_widget.write(
				Text(f"error: {self.error_text}", style=f"bold {NORD_COLORS['error']}")
			)
			return
		for line in self.compiled_text.split("\n"):
			self.command_widget.write(self._highlight_command(line))

	#============================
	def _build_command_styles(self) -> list:
		return [
			(re.compile(r"\bffmpeg\b|\bmkdir\b|\becho\b|\bfor\b|\bdo\b|\bdone\b"),
				NORD_COLORS['header']),
			(re.compile(r"(?<![\w%$])--?[A-Za-z][A-Za-z0-9_:-]*"), NORD_COLORS['flags']),
			(re.compile(r"\b\d+\.\d+\b"), NORD_COLORS['numbers']),
			(re.compile(r"\b\d+\b(?!\.\d)"), NORD_COLORS['numbers']),
			(re.compile(r"\[[A-Za-z0-9_]+\]"), NORD_COLORS['paths']),
			(re.compile(r"%%~?[a-z]+|\$\{?[A-Za-z_][A-Za-z0-9_%.*]*\}?"),
				NORD_COLORS['strings']),
		]

	#============================
	def _highlight_command(self, command: str):
		if command is None or command == "":
			return ""
		text = Text(command, style=f"bold {NORD_COLORS['command']}")
		for pattern, style in self.command_styles:
			for match in pattern.finditer(command):
				text.stylize(style, match.start(), match.end())
		return text

#============================================

def main():
	args = parse_args()
	app = FfstudioTuiApp(args.yamlfile,
		dialect=args.dialect,
		strict=args.strict,
		debug_log=args.debug_log)
	app.run()

#============================================

if __name__ == '__main__':
	main()
