"""
Dataset component.

Generates the help-assistant Q&A corpus as text and JSONL files.
"""

from .component import (
    format_txt,
    generate_datasets,
    generate_pairs,
    load_config_from_rules,
    to_record,
    write_jsonl,
    write_txt,
)
from .models import DatasetConfig, DatasetOutput, QAPair
from .seeds import CANONICAL, TOPICS, TopicTemplate

__all__ = [
    # Functions
    "format_txt",
    "generate_datasets",
    "generate_pairs",
    "load_config_from_rules",
    "to_record",
    "write_jsonl",
    "write_txt",
    # Models
    "DatasetConfig",
    "DatasetOutput",
    "QAPair",
    # Seeds
    "CANONICAL",
    "TOPICS",
    "TopicTemplate",
]
