# levelgen/service/model_backend.py
import logging
from typing import Optional

from openai import OpenAI, OpenAIError

from ..utils.bounds import MAX_JUMP_REACH, MIN_PLATFORM_CLEARANCE
from .generation import GenerationError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = f"""You are a game level designer for a winter courier delivery game.
Generate level configurations as JSON objects.

The player is a courier who must pick up packages from a warehouse and deliver them to houses.
The game has:
- Houses at various x positions (range: 400-2800)
- Platforms the player can jump on - IMPORTANT: player can only jump about {MAX_JUMP_REACH:.0f} pixels high!
- Falling ice blocks (hazards)
- A thief that can steal packages
- Power-ups

When asked to generate a level, respond with ONLY a valid JSON object in this format:
{{
  "name": "Level Name",
  "theme": "winter",
  "worldWidth": 3000,
  "description": "Brief description of the level",
  "houses": [
    {{"x": 400, "color": "#c0392b"}},
    {{"x": 700, "color": "#27ae60"}}
  ],
  "platforms": [
    {{"x": 350, "heightAboveGround": 80, "width": 80, "moving": false, "speed": 1}},
    {{"x": 600, "heightAboveGround": 100, "width": 100, "moving": true, "speed": 1.5}}
  ],
  "iceCount": 14,
  "iceSpeed": 1.0,
  "deliveriesNeeded": 6,
  "thiefEnabled": true,
  "thiefSpeed": 1.0,
  "powerUpChance": 0.3
}}

CRITICAL: Platform "heightAboveGround" MUST be between {MIN_PLATFORM_CLEARANCE:.0f} and {MAX_JUMP_REACH:.0f} pixels. The player cannot jump higher than {MAX_JUMP_REACH:.0f} pixels!

Make levels creative and fun! Respond with ONLY the JSON, no other text."""

class ModelBackend:
    """Chat-completion model behind an OpenAI-compatible endpoint (Groq by default)."""

    def __init__(self, api_key: Optional[str], model: str = "llama-3.1-8b-instant",
                 base_url: str = "https://api.groq.com/openai/v1", timeout: float = 20.0,
                 temperature: float = 0.8, max_tokens: int = 1024):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("no API key configured for the level model")
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url,
                                  timeout=self.timeout, max_retries=0)
        return self._client

    def complete(self, prompt: str) -> Optional[str]:
        client = self._get_client()
        logger.info("generating level with prompt: %r", prompt[:200])
        try:
            completion = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            logger.error("model API error: %s", e)
            raise GenerationError(str(e)) from e
        if not completion.choices:
            return None
        return completion.choices[0].message.content
