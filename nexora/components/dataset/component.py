"""
Dataset component.

Builds the question/answer corpus for the help assistant: the canonical
seeds first, then round-robin expansion over the topic templates. Output is
plain text (`Q:` / `A:` blocks) and JSONL chat records.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from nexora.rules.models import DatasetRules

from .models import DatasetConfig, DatasetOutput, QAPair
from .seeds import CANONICAL, TOPICS

logger = logging.getLogger(__name__)


def generate_pairs(min_count: int, brand: str = "Nexora") -> list[QAPair]:
    """
    Canonical pairs, then topic expansion until at least `min_count` pairs.

    Topics rotate one per step. Once every topic has had a turn the cycle
    number is appended (`(v2)` / `(Details 2).`) so later pairs stay distinct.
    The canonical pairs are always all included.
    """
    pairs = [QAPair(q.format(brand=brand), a.format(brand=brand)) for q, a in CANONICAL]

    i = 0
    while len(pairs) < min_count:
        topic = TOPICS[i % len(TOPICS)]
        question = topic.questions[i % len(topic.questions)].format(brand=brand)
        answer = topic.answers[i % len(topic.answers)].format(brand=brand)

        variant = i // len(TOPICS) + 1
        if variant > 1:
            question = f"{question} (v{variant})"
            answer = f"{answer} (Details {variant})."

        pairs.append(QAPair(question, answer))
        i += 1

    return pairs


def format_txt(pairs: Sequence[QAPair]) -> str:
    return "\n\n".join(f"Q: {p.question}\nA: {p.answer}" for p in pairs) + "\n"


def to_record(pair: QAPair, brand: str = "Nexora") -> dict:
    return {
        "messages": [
            {"role": "user", "content": pair.question},
            {"role": "assistant", "content": pair.answer},
        ],
        "source": brand.lower(),
        "type": "qa",
    }


def write_txt(path: Path, pairs: Sequence[QAPair]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_txt(pairs), encoding="utf-8")
    return path


def write_jsonl(path: Path, pairs: Sequence[QAPair], brand: str = "Nexora") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for pair in pairs:
            f.write(json.dumps(to_record(pair, brand), ensure_ascii=False, separators=(",", ":")) + "\n")
    return path


def generate_datasets(config: DatasetConfig | None = None, out_dir: Path | None = None) -> DatasetOutput:
    """
    Write the train/val text and JSONL files.

    Files are named `<brand>_train.txt`, `<brand>_val.txt`,
    `<brand>_train.jsonl` and `<brand>_val.jsonl` (brand lowercased).
    """
    config = config or DatasetConfig()
    target = Path(out_dir) if out_dir is not None else Path(config.output_dir)
    stem = config.brand.lower()

    train = generate_pairs(config.train_min, config.brand)
    val = generate_pairs(config.val_count, config.brand)[: config.val_count]

    try:
        files = [
            write_txt(target / f"{stem}_train.txt", train),
            write_txt(target / f"{stem}_val.txt", val),
            write_jsonl(target / f"{stem}_train.jsonl", train, config.brand),
            write_jsonl(target / f"{stem}_val.jsonl", val, config.brand),
        ]
    except OSError as e:
        logger.error(f"Failed to write dataset to {target}: {e}")
        return DatasetOutput(success=False, errors=[str(e)])

    logger.info(f"Wrote {len(train)} training and {len(val)} validation pairs to {target}")
    return DatasetOutput(
        success=True,
        train_count=len(train),
        val_count=len(val),
        files=files,
    )


def load_config_from_rules(rules: DatasetRules) -> DatasetConfig:
    return DatasetConfig(
        brand=rules.brand,
        output_dir=rules.output_dir,
        train_min=rules.train_min,
        val_count=rules.val_count,
    )
