from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    # Compound models run a web search and attach its results to the message.
    model: str = os.getenv("GROQ_SEARCH_MODEL", "groq/compound")
    timeout: float = 30.0
    max_tokens: int = 2048
    temperature: float = 0.2
    max_places: int = 10
    enabled: bool = True


DEFAULT_LLM_CONFIG = LLMConfig()
