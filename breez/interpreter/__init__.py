"""
Query interpreter layer.

Responsibilities:
- Turn a free-text food request into structured dish attributes.
- Talk either to the Groq LLM or to a remote interpreter service.
- Return empty attributes on any failure so search degrades to popular dishes.
"""
from __future__ import annotations

from typing import Protocol

from ..recommendations.models import QueryAttributes
from .config import DEFAULT_INTERPRETER_CONFIG, InterpreterConfig
from .groq_client import GroqQueryInterpreter
from .http_client import HttpQueryInterpreter


class QueryInterpreter(Protocol):
    def interpret(self, text: str) -> QueryAttributes: ...


def build_query_interpreter(config: InterpreterConfig) -> QueryInterpreter:
    if config.interpreter_url:
        return HttpQueryInterpreter(config=config)
    return GroqQueryInterpreter(config)


def get_query_interpreter() -> QueryInterpreter:
    """Interpreter chosen by the environment: remote service if configured, else Groq."""
    return build_query_interpreter(DEFAULT_INTERPRETER_CONFIG)
