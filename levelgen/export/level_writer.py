# levelgen/export/level_writer.py
import json
import os

from ..utils.level_schema import LevelConfig

def write_level(level: LevelConfig, outdir: str, name: str = "level.json") -> str:
    os.makedirs(outdir, exist_ok=True)
    path = os.path.join(outdir, name)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(level.to_wire(), f, indent=2)
    return path

def read_level(path: str) -> LevelConfig:
    # files we wrote ourselves; anything else should go through the validator
    with open(path, encoding="utf-8") as f:
        return LevelConfig.model_validate(json.load(f))
