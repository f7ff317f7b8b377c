"""Gemini Entry Generation Service - furigana tokens and J-J definitions via Google Gemini API."""

import json
import logging
import time
from typing import Optional

import google.genai as genai
from google.genai import types

from koto.core import tokens_from_payload
from koto.services.generation.entry_generation_service import EntryGenerationService, GenerationResult
from koto.services.text_processing import normalize_tokens

logger = logging.getLogger(__name__)

TOKEN_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "text": types.Schema(type=types.Type.STRING),
        "furigana": types.Schema(type=types.Type.STRING, nullable=True),
    },
    required=["text", "furigana"],
)

ENTRY_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "reading": types.Schema(type=types.Type.ARRAY, items=TOKEN_SCHEMA),
        "meaning": types.Schema(type=types.Type.STRING),
    },
    required=["reading", "meaning"],
)


class GeminiEntryGenerationService(EntryGenerationService):
    """Entry generation using Google Gemini structured output.

    Temperature is 0 so the same term yields the same segmentation.
    """

    MODEL_NAME = "gemini-2.0-flash"
    MAX_RETRIES = 3
    INITIAL_RETRY_DELAY = 2

    PROMPT_TEMPLATE = """You are a Japanese dictionary assistant for KOTO, a vocabulary notebook.

Target: "{target}"
{context_line}

[Instruction]
1. Split the target into tokens, left to right, covering every character exactly once.
   Keep each kanji compound together when it has a single reading; split okurigana and particles into their own tokens.
2. For every token that contains kanji, give its reading in hiragana as "furigana". Use the reading that fits the context.
3. For tokens written only in hiragana or katakana, set "furigana" to null.
4. Give a concise Japanese definition (国語辞典 style, 1-2 sentences) suitable for a native high school student.
5. Output only Japanese. Do not output Chinese or English.

Example for 金メダル級:
{{"reading": [{{"text": "金", "furigana": "きん"}}, {{"text": "メダル", "furigana": null}}, {{"text": "級", "furigana": "きゅう"}}], "meaning": "..."}}
"""

    def generate(self, target: str, context: Optional[str], api_key: str) -> GenerationResult:
        """Request tokens and meaning, retrying on rate limits."""
        retry_delay = self.INITIAL_RETRY_DELAY
        context_line = f'Full Context: "{context}"' if context else "Full Context: None (target is the complete input)"
        prompt = self.PROMPT_TEMPLATE.format(target=target, context_line=context_line)

        for attempt in range(1, self.MAX_RETRIES + 1):
            logger.debug("Generation request attempt %d/%d for %r (model %s)",
                         attempt, self.MAX_RETRIES, target, self.MODEL_NAME)
            try:
                client = genai.Client(api_key=api_key)
                response = client.models.generate_content(
                    model=self.MODEL_NAME,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=0,
                        response_mime_type="application/json",
                        response_schema=ENTRY_SCHEMA,
                    ),
                )
            except Exception as exc:
                error_msg = str(exc).lower()
                is_rate_limit = ("429" in error_msg or "resource_exhausted" in error_msg
                                 or "quota" in error_msg or "rate_limit" in error_msg)

                if is_rate_limit and attempt < self.MAX_RETRIES:
                    logger.info("Rate limit hit, retrying in %d seconds", retry_delay)
                    time.sleep(retry_delay)
                    retry_delay *= 2
                    continue

                logger.warning("Generation failed for %r: %s: %s", target, type(exc).__name__, exc)
                return self._error(self._classify_error(error_msg, is_rate_limit, exc))

            if not response.text:
                return self._error("Empty response from API")
            return self._parse_response(response.text)

        return self._error("Generation failed after retries")

    def _parse_response(self, text: str) -> GenerationResult:
        try:
            payload = json.loads(text)
        except ValueError:
            logger.warning("Generation response is not JSON: %r", text[:100])
            return self._error("Response was not valid JSON")

        if not isinstance(payload, dict):
            return self._error("Response did not match the entry schema")
        tokens = tokens_from_payload(payload.get("reading"))
        meaning = payload.get("meaning")
        if tokens is None or not isinstance(meaning, str):
            logger.warning("Generation response does not match schema: %r", text[:100])
            return self._error("Response did not match the entry schema")

        logger.info("Generation succeeded with %d tokens", len(tokens))
        return GenerationResult(
            tokens=normalize_tokens(tokens),
            meaning=meaning.strip(),
            model=self.MODEL_NAME,
        )

    def _classify_error(self, error_msg: str, is_rate_limit: bool, exc: Exception) -> str:
        if "api_key" in error_msg or "authentication" in error_msg or "invalid" in error_msg:
            return f"Invalid API key or request: {exc}"
        if is_rate_limit:
            return "API quota exceeded. Please try again later."
        if "deadline" in error_msg or "timeout" in error_msg:
            return "Request timed out. Please check your connection."
        return f"Generation failed: {exc}"

    def _error(self, message: str) -> GenerationResult:
        return GenerationResult(model=self.MODEL_NAME, error=message)
