from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class InterpreterConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = "llama-3.3-70b-versatile"
    timeout: float = 10.0
    max_tokens: int = 256
    enabled: bool = True
    # When set, queries go to a remote interpreter service instead of Groq.
    interpreter_url: str = os.getenv("BREEZ_INTERPRETER_URL", "")


DEFAULT_INTERPRETER_CONFIG = InterpreterConfig()
