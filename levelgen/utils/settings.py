# levelgen/utils/settings.py
import logging
import os
from typing import Dict, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, Field

def _load_env(env_file: Optional[str]) -> Dict[str, str]:
    # process environment wins over the .env file
    values = {}
    if env_file and os.path.isfile(env_file):
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ)
    return values

def _env_float(env: Dict[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


class Settings(BaseModel):
    service_url: Optional[str] = None
    timeout: float = Field(default=20.0, gt=0)
    output_dir: str = "outputs"
    model: str = "llama-3.1-8b-instant"
    model_base_url: str = "https://api.groq.com/openai/v1"
    api_key: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = ".env") -> "Settings":
        env = _load_env(env_file)
        return cls(
            service_url=env.get("LEVELGEN_SERVICE_URL") or None,
            timeout=_env_float(env, "LEVELGEN_TIMEOUT", 20.0),
            output_dir=env.get("LEVELGEN_OUTPUT_DIR", "outputs"),
            model=env.get("LEVELGEN_MODEL", "llama-3.1-8b-instant"),
            model_base_url=env.get("LEVELGEN_MODEL_BASE_URL", "https://api.groq.com/openai/v1"),
            api_key=env.get("GROQ_API_KEY") or None,
            log_level=env.get("LEVELGEN_LOG_LEVEL", "INFO").upper(),
        )

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
