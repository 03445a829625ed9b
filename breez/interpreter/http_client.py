from __future__ import annotations

import logging

import requests

from ..recommendations.models import QueryAttributes
from .config import DEFAULT_INTERPRETER_CONFIG, InterpreterConfig

logger = logging.getLogger(__name__)


class HttpQueryInterpreter:
    """Client for a remote interpreter service exposing ``POST /sendQuery``."""

    def __init__(
        self,
        url: str | None = None,
        config: InterpreterConfig = DEFAULT_INTERPRETER_CONFIG,
    ) -> None:
        self._url = url or config.interpreter_url
        self._timeout = config.timeout

    def interpret(self, text: str) -> QueryAttributes:
        try:
            response = requests.post(
                self._url,
                json={"user_query_str": text},
                timeout=self._timeout,
            )
        except requests.RequestException:
            logger.warning("Interpreter request to %s failed", self._url, exc_info=True)
            return QueryAttributes()

        if response.status_code != 200:
            logger.warning("Interpreter returned status code %s", response.status_code)
            return QueryAttributes()

        try:
            payload = response.json()
            if not isinstance(payload, dict):
                raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
            return QueryAttributes.model_validate(payload)
        except ValueError:
            logger.warning("Interpreter returned a malformed body", exc_info=True)
            return QueryAttributes()
