# levelgen/service/synthesis.py
import logging
import threading
import time
from typing import Optional

from ..planners.procedural import ProceduralGenerator
from ..planners.response_parser import extract_candidate
from ..planners.validator import LevelValidator
from ..utils.level_schema import LevelConfig
from .generation import GenerationService

logger = logging.getLogger(__name__)

class SynthesisListener:
    """Host UI hooks. The base class ignores everything."""

    def on_synthesis_start(self) -> None:
        pass

    def on_synthesis_end(self) -> None:
        pass

    def on_level_ready(self, level: LevelConfig) -> None:
        pass

class CurrentLevel:
    """Holds the active custom level; None means the game's built-in level."""

    def __init__(self):
        self._lock = threading.Lock()
        self._level: Optional[LevelConfig] = None

    def set(self, level: LevelConfig) -> None:
        with self._lock:
            self._level = level

    def get(self) -> Optional[LevelConfig]:
        with self._lock:
            return self._level

    def clear(self) -> None:
        with self._lock:
            self._level = None

class LevelSynthesisService:
    def __init__(
        self,
        generator: GenerationService,
        procedural: Optional[ProceduralGenerator] = None,
        validator: Optional[LevelValidator] = None,
        listener: Optional[SynthesisListener] = None,
        current: Optional[CurrentLevel] = None,
        timeout: float = 20.0,
    ):
        self.generator = generator
        self.procedural = procedural or ProceduralGenerator()
        self.validator = validator or LevelValidator(self.procedural)
        self.listener = listener or SynthesisListener()
        self.current = current or CurrentLevel()
        self.timeout = timeout
        self._busy = threading.Lock()

    @property
    def generating(self) -> bool:
        return self._busy.locked()

    def synthesize_from_prompt(self, prompt: str) -> Optional[LevelConfig]:
        """Ask the generation service for a level; any failure yields a procedural one.

        Returns None only when another request is already in flight.
        """
        if not self._busy.acquire(blocking=False):
            logger.info("level generation already in progress, ignoring request")
            return None
        try:
            self.listener.on_synthesis_start()
            try:
                t0 = time.time()
                raw = self._call_generator(prompt)
                logger.info(f"[TIMER] generate: {time.time()-t0:.2f}s")
                if raw is None or not raw.strip():
                    logger.warning("empty response from generation service, using fallback")
                    level = self.procedural.generate_random_level("medium")
                else:
                    t1 = time.time()
                    level = self.validator.normalize(extract_candidate(raw))
                    logger.info(f"[TIMER] parse+validate: {time.time()-t1:.2f}s")
            except Exception:
                logger.warning("level generation failed, using fallback", exc_info=True)
                level = self.procedural.generate_random_level("medium")
            finally:
                self.listener.on_synthesis_end()
            self._publish(level)
            return level
        finally:
            self._busy.release()

    def synthesize_quick(self, tier: str = "medium") -> LevelConfig:
        self.listener.on_synthesis_start()
        try:
            level = self.procedural.generate_random_level(tier)
        finally:
            self.listener.on_synthesis_end()
        self._publish(level)
        return level

    def clear_custom_level(self) -> None:
        self.current.clear()

    def _call_generator(self, prompt: str) -> Optional[str]:
        """Run generate() on a daemon thread and wait at most self.timeout.

        A worker still blocked after the timeout is abandoned; being a daemon it
        does not hold up interpreter exit.
        """
        done = threading.Event()
        outcome = {}

        def work():
            try:
                outcome["text"] = self.generator.generate(prompt)
            except Exception as e:
                outcome["error"] = e
            finally:
                done.set()

        threading.Thread(target=work, name="levelgen-generate", daemon=True).start()
        if not done.wait(self.timeout):
            raise TimeoutError(f"generation service exceeded {self.timeout}s")
        if "error" in outcome:
            raise outcome["error"]
        return outcome.get("text")

    def _publish(self, level: LevelConfig) -> None:
        self.current.set(level)
        self.listener.on_level_ready(level)
