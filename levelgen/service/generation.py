# levelgen/service/generation.py
import logging
from typing import Optional, Protocol

import requests

logger = logging.getLogger(__name__)

class GenerationError(Exception):
    """The level text could not be obtained (transport, status, timeout or model failure)."""

class GenerationService(Protocol):
    def generate(self, prompt: str) -> Optional[str]: ...

class HttpGenerationService:
    """Posts the prompt to a level server and returns the raw model text."""

    def __init__(self, url: str, timeout: float = 20.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()

    def generate(self, prompt: str) -> Optional[str]:
        try:
            resp = self.session.post(self.url, json={"prompt": prompt}, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.Timeout as e:
            raise GenerationError(f"level server timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            raise GenerationError(f"level server request failed: {e}") from e
        except ValueError as e:
            raise GenerationError("level server returned non-JSON body") from e

        if not isinstance(data, dict) or not data.get("success", False):
            error = data.get("error") if isinstance(data, dict) else None
            raise GenerationError(f"level server reported failure: {error or 'unknown'}")
        level = data.get("level")
        return level if isinstance(level, str) else None

class ModelGenerationService:
    """In-process variant: calls the model backend directly."""

    def __init__(self, backend):
        self.backend = backend

    def generate(self, prompt: str) -> Optional[str]:
        return self.backend.complete(prompt)
