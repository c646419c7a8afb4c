from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from common.settings import settings


class AppConfig(BaseModel):
    timeout: int = Field(default=10, gt=0)
    user_agent: str = "WordCount/1.0"
    cache_dir: Path | None = None
    extract_html: bool = False


class AnalysisConfig(BaseModel):
    minimum_word_length: int = Field(default=3, ge=0)
    top_words_count: int = Field(default=20, ge=0)
    histogram_words_count: int = Field(default=5, ge=0)
    histogram_marker_character: str = Field(default="|", min_length=1)


class GlobalYAMLConfig(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)


def load_yaml_config(path: Path | None = None) -> GlobalYAMLConfig:
    """
    Read the YAML config file. Without an explicit path the default location
    is tried and the built-in defaults are used when it does not exist; an
    explicit path must exist. An empty file also yields the defaults.
    """
    if path is None:
        path = Path(settings.config_path)
        if not path.exists():
            return GlobalYAMLConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return GlobalYAMLConfig(**raw)
