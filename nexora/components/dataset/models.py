"""
Dataset component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class DatasetConfig:
    """Dataset generation settings from rules."""

    brand: str = "Nexora"
    output_dir: str = "data"
    train_min: int = 520
    val_count: int = 60


@dataclass(frozen=True)
class QAPair:
    question: str
    answer: str


@dataclass(frozen=True)
class DatasetOutput:
    """Files written by one generation run."""

    success: bool
    train_count: int = 0
    val_count: int = 0
    files: list[Path] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
