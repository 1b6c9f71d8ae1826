"""LLM handler that turns a modification prompt into an assignment object.

Implements ModificationService:
- Lazy OpenAI-compatible client setup from Config
- One chat completion per request (no retries)
- Strict JSON parsing of the model answer
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from openai import OpenAI

from assignment_modifier.config import Config
from assignment_modifier.modules.prompt_builder import SYSTEM_PROMPT
from assignment_modifier.utils import (
    EmptyModelResponseError,
    InvalidModelOutputError,
    ModelRequestError,
    assignment_shape_problems,
    handle_api_error,
)

# Raw model output echoed into logs when parsing fails
RAW_LOG_CHARS = 400


class ModificationService:
    def __init__(
        self,
        chat_model: Optional[str] = None,
        temperature: Optional[float] = None,
        client: Optional[Any] = None,
    ) -> None:
        # Configuration-driven defaults with optional overrides
        self.chat_model: str = chat_model or Config.CHAT_MODEL
        self.temperature: float = Config.TEMPERATURE if temperature is None else float(temperature)
        self.openai_client = client

    def _client(self) -> Any:
        # Lazy-init so the app can start without a key
        if self.openai_client is None:
            self.openai_client = OpenAI(api_key=Config.OPENAI_API_KEY or None, base_url=Config.OPENAI_BASE_URL)
        return self.openai_client

    def build_messages(self, prompt: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def complete(self, prompt: str) -> str:
        """Send the prompt and return the first choice's text."""
        try:
            resp = self._client().chat.completions.create(
                model=self.chat_model,
                messages=self.build_messages(prompt),
                temperature=self.temperature,
            )
        except Exception as e:
            raise ModelRequestError(f"Model request failed: {handle_api_error(e)['error']}") from e

        choices = getattr(resp, "choices", None) or []
        raw = choices[0].message.content if choices and choices[0].message else None
        if not raw:
            raise EmptyModelResponseError("Model returned empty response.")
        return raw

    def parse(self, raw: str) -> Any:
        """Parse model text strictly as JSON; one attempt, no repair."""
        try:
            parsed = json.loads(raw)
        except ValueError as e:
            excerpt = raw[:RAW_LOG_CHARS]
            logging.info(f"Unparseable model output: {excerpt}")
            raise InvalidModelOutputError("Model output was not valid JSON.", raw_excerpt=excerpt) from e

        problems = assignment_shape_problems(parsed)
        if problems:
            logging.warning(f"Model JSON does not match the assignment shape: {'; '.join(problems)}")
        return parsed

    def modify(self, prompt: str) -> Any:
        return self.parse(self.complete(prompt))
