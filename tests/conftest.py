"""Shared pytest fixtures for level generation tests."""

from __future__ import annotations

import random
import threading
from typing import Optional

import pytest

from levelgen.planners.procedural import ProceduralGenerator
from levelgen.planners.validator import LevelValidator
from levelgen.service.generation import GenerationError
from levelgen.service.synthesis import SynthesisListener


class FakeGenerator:
    """GenerationService double: returns canned text or raises."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class BlockingGenerator:
    """Blocks inside generate() until released, so a request stays in flight."""

    def __init__(self, text: str = '{"name": "Slow"}'):
        self.text = text
        self.started = threading.Event()
        self.release = threading.Event()

    def generate(self, prompt: str) -> Optional[str]:
        self.started.set()
        self.release.wait(timeout=5)
        return self.text


class RecordingListener(SynthesisListener):
    def __init__(self):
        self.events: list[str] = []
        self.levels = []

    def on_synthesis_start(self) -> None:
        self.events.append("start")

    def on_synthesis_end(self) -> None:
        self.events.append("end")

    def on_level_ready(self, level) -> None:
        self.events.append("ready")
        self.levels.append(level)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def procedural(rng: random.Random) -> ProceduralGenerator:
    return ProceduralGenerator(rng)


@pytest.fixture
def validator(procedural: ProceduralGenerator) -> LevelValidator:
    return LevelValidator(procedural)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def failing_generator() -> FakeGenerator:
    return FakeGenerator(error=GenerationError("connection refused"))
