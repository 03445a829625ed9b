from __future__ import annotations

import json
import logging

from groq import Groq

from ..recommendations.models import QueryAttributes
from .config import DEFAULT_INTERPRETER_CONFIG, InterpreterConfig

logger = logging.getLogger(__name__)

QUERY_EXTRACTION_PROMPT = """\
You are a food ordering query parser for a campus food court. Given what a \
user types, extract the dish attributes they are asking for as JSON.

Return ONLY valid JSON with these fields (use null for anything not stated):
{
  "category": "dish family e.g. Chai, Cold Coffee, Milkshake, Burger, Pizza, Juice",
  "subcategory": "specific variant e.g. Masala Chai, Oreo Shake, Veg Burger",
  "vendor": "Uncle Tony's or Lounge1",
  "taste": "Sweet / savory / Umami",
  "size": "Small / Medium / Large",
  "healthy": "true or false",
  "price": "cheap or medium",
  "dietary_restrictions": "a single restriction to avoid, e.g. lactose intolerant"
}

Only fill a field when the user clearly asks for it. If the user mentions \
several dietary restrictions, return them as a list of strings."""


class GroqQueryInterpreter:
    def __init__(self, config: InterpreterConfig = DEFAULT_INTERPRETER_CONFIG) -> None:
        self._config = config

    def interpret(self, text: str) -> QueryAttributes:
        """
        Ask the Groq LLM to turn free text into structured attributes.

        Returns empty attributes when disabled or on any failure
        (timeout, bad JSON, API error), so the search falls back to
        popular dishes.
        """
        config = self._config
        if not config.enabled or not config.api_key or not text.strip():
            return QueryAttributes()

        try:
            client = Groq(api_key=config.api_key, timeout=config.timeout)
            response = client.chat.completions.create(
                model=config.model,
                messages=[
                    {"role": "system", "content": QUERY_EXTRACTION_PROMPT},
                    {"role": "user", "content": text},
                ],
                max_tokens=config.max_tokens,
                temperature=0.1,
                response_format={"type": "json_object"},
            )

            content = response.choices[0].message.content or "{}"
            parsed = json.loads(content)
            if not isinstance(parsed, dict):
                raise ValueError(f"Expected a JSON object, got {type(parsed).__name__}")
            return QueryAttributes.model_validate(parsed)

        except Exception:
            logger.warning("Query interpretation failed, using empty attributes", exc_info=True)
            return QueryAttributes()
