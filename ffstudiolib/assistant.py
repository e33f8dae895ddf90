#!/usr/bin/env python3

"""
Question/answer client for the hosted Gemini model.

The assistant only ever sees a short summary of the current settings,
never the compiled command.
"""

# Standard Library
import logging
import os

# PIP3 modules
import requests

# local repo modules
from ffstudiolib.core import project
from ffstudiolib.core import settings as settings_mod

logger = logging.getLogger(__name__)

#============================================

API_ROOT = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = "gemini-2.5-flash"
REQUEST_TIMEOUT = 60

SYSTEM_PROMPT = (
	"You are an FFmpeg expert helping a user build a watermark and batch "
	"processing command. Answer briefly and practically. When you suggest "
	"filters, show the exact ffmpeg syntax."
)

STALE_NOTE = "(answered for earlier settings)"

#============================================

class AssistantError(RuntimeError):
	pass

#============================================

def build_context(config: settings_mod.WatermarkSettings) -> str:
	return project.summarize_settings(config)

#============================================

def is_stale(asked_context: str, current_context: str) -> bool:
	return asked_context != current_context

#============================================

def label_answer(answer: str, asked_context: str, current_context: str) -> str:
	"""
	Prefix a note when the settings moved on while the question was in flight.
	"""
	if is_stale(asked_context, current_context):
		return f"{STALE_NOTE} {answer}"
	return answer

#============================================

class GeminiAssistant():
	def __init__(self, api_key: str = None, model: str = None,
		timeout: float = REQUEST_TIMEOUT):
		if api_key is None:
			api_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
		if model is None:
			model = os.environ.get("FFSTUDIO_GEMINI_MODEL", DEFAULT_MODEL)
		self.api_key = api_key
		self.model = model
		self.timeout = timeout

	#============================
	def _build_payload(self, context: str, question: str) -> dict:
		prompt = f"Current settings: {context}\n\nQuestion: {question}"
		return {
			'systemInstruction': {'parts': [{'text': SYSTEM_PROMPT}]},
			'contents': [{'role': 'user', 'parts': [{'text': prompt}]}],
		}

	#============================
	def ask(self, context: str, question: str) -> str:
		if not self.api_key:
			raise AssistantError("GEMINI_API_KEY is not set")
		question = question.strip()
		if question == "":
			raise AssistantError("question is empty")
		url = f"{API_ROOT}/{self.model}:generateContent"
		payload = self._build_payload(context, question)
		logger.debug("asking %s: %s", self.model, question)
		try:
			response = requests.post(url, params={'key': self.api_key},
				json=payload, timeout=self.timeout)
		except requests.RequestException as exc:
			raise AssistantError(f"assistant request failed: {exc}") from exc
		if not response.ok:
			snippet = response.text[:400]
			raise AssistantError(
				f"assistant request failed ({response.status_code}): {snippet}")
		try:
			data = response.json()
		except ValueError as exc:
			raise AssistantError(f"assistant returned invalid JSON: {exc}") from exc
		return self._extract_text(data)

	#============================
	def _extract_text(self, data: dict) -> str:
		try:
			parts = data['candidates'][0]['content']['parts']
		except (KeyError, IndexError, TypeError) as exc:
			raise AssistantError("unexpected assistant response schema") from exc
		texts = [part.get('text', '') for part in parts if isinstance(part, dict)]
		text = "".join(texts).strip()
		if text == "":
			raise AssistantError("assistant returned an empty answer")
		return text

#============================================

def answer_question(assistant: GeminiAssistant, context: str, question: str) -> str:
	"""
	Ask the assistant, turning failures into a visible message.
	"""
	try:
		return assistant.ask(context, question)
	except AssistantError as exc:
		logger.warning("assistant error: %s", exc)
		return f"Sorry, I could not get an answer: {exc}"
