"""
Rules loading and validation tests.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from nexora.rules.loader import apply_env_overrides, load_rules, load_rules_or_default
from nexora.rules.models import Rules


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(text)
    return path


class TestLoadRules:
    def test_project_rules_file(self, rules: Rules) -> None:
        assert rules.gate.min_preview_chars == 80
        assert rules.gate.preview_ratio == 0.5
        assert rules.revenue.creator_rate == Decimal("0.80")
        assert rules.revenue.creator_activation_fee == Decimal("19.00")
        assert rules.editor.min_blocks == 1
        assert rules.dataset.train_min == 520
        assert rules.membership.offer_demo_upgrade is False

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_rules(write(tmp_path, "")) == Rules()

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, "gate:\n  min_preview_chars: 10\n"))
        assert rules.gate.min_preview_chars == 10
        assert rules.gate.preview_ratio == 0.5
        assert rules.api.base_url == "http://localhost:5001/api"

    def test_fenced_yaml(self, tmp_path: Path) -> None:
        text = "# Rules\n\nSome prose.\n\n```yaml\ndashboard:\n  reading_words_per_minute: 250\n```\n"
        rules = load_rules(write(tmp_path, text))
        assert rules.dashboard.reading_words_per_minute == 250

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write(tmp_path, "gate: [unclosed"))

    def test_schema_violation(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="validation failed"):
            load_rules(write(tmp_path, "gate:\n  preview_ratio: 1.5\n"))

    def test_rates_must_sum_to_one(self, tmp_path: Path) -> None:
        text = "revenue:\n  creator_rate: '0.5'\n  platform_rate: '0.2'\n"
        with pytest.raises(ValueError):
            load_rules(write(tmp_path, text))


class TestEnvOverrides:
    def test_api_urls_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEXORA_API_URL", "https://api.example.com/api")
        monkeypatch.setenv("NEXORA_BILLING_URL", "https://example.com")

        rules = apply_env_overrides(Rules())

        assert rules.api.base_url == "https://api.example.com/api"
        assert rules.api.billing_url == "https://example.com"

    def test_no_overrides_returns_same_rules(self) -> None:
        rules = Rules()
        assert apply_env_overrides(rules) is rules


class TestLoadOrDefault:
    def test_missing_file_falls_back(self, tmp_path: Path) -> None:
        assert load_rules_or_default(tmp_path / "nope.yaml") == Rules()

    def test_rules_path_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = write(tmp_path, "editor:\n  min_blocks: 2\n")
        monkeypatch.setenv("NEXORA_RULES_PATH", str(path))
        assert load_rules_or_default().editor.min_blocks == 2
