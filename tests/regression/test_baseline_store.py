#!/usr/bin/env python3
"""
Tests for baseline storage
"""

import json

import pytest

from perfgate.core.errors import BaselineNotFoundError, BaselineStorageError
from perfgate.regression.baseline_store import InMemoryBaselineStore, JsonBaselineStore, validate_key


class TestValidateKey:
    """Test baseline key validation"""

    @pytest.mark.parametrize("key", ["render-moderate", "compute_1024", "v1.2"])
    def test_valid(self, key):
        assert validate_key(key) == key

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", ".hidden", "with space"])
    def test_invalid(self, key):
        with pytest.raises(ValueError):
            validate_key(key)


class TestInMemoryBaselineStore:
    """Test the dictionary-backed store"""

    def test_save_and_load(self, baseline_set):
        store = InMemoryBaselineStore()
        store.save("render", baseline_set)

        assert store.load("render") is baseline_set
        assert store.exists("render")
        assert store.keys() == ["render"]

    def test_missing(self):
        with pytest.raises(BaselineNotFoundError):
            InMemoryBaselineStore().load("render")

    def test_delete(self, baseline_set):
        store = InMemoryBaselineStore()
        store.save("render", baseline_set)

        assert store.delete("render")
        assert not store.delete("render")
        assert not store.exists("render")


class TestJsonBaselineStore:
    """Test the JSON directory store"""

    def test_save_and_load(self, json_store, baseline_set):
        json_store.save("render-moderate", baseline_set)
        loaded = json_store.load("render-moderate")

        assert loaded.samples == baseline_set.samples
        assert loaded.metric_samples() == baseline_set.metric_samples()
        assert loaded.label == "baseline"

    def test_registry_written(self, json_store, baseline_set):
        json_store.save("render-moderate", baseline_set)

        with open(json_store.registry_file) as f:
            registry = json.load(f)
        entry = registry["baselines"]["render-moderate"]
        assert entry["sample_count"] == 20
        assert entry["baseline_file"].endswith("render-moderate.json")

    def test_registry_survives_reopen(self, json_store, baseline_set):
        json_store.save("render-moderate", baseline_set)
        reopened = JsonBaselineStore(json_store.baselines_dir)

        assert reopened.keys() == ["render-moderate"]
        assert reopened.exists("render-moderate")

    def test_missing_baseline(self, json_store):
        with pytest.raises(BaselineNotFoundError) as exc_info:
            json_store.load("render-moderate")
        assert exc_info.value.details["key"] == "render-moderate"

    def test_corrupt_baseline(self, json_store, baseline_set):
        json_store.save("render-moderate", baseline_set)
        (json_store.sets_dir / "render-moderate.json").write_text("{not json")

        with pytest.raises(BaselineStorageError) as exc_info:
            json_store.load("render-moderate")
        assert exc_info.value.details["operation"] == "load"

    def test_empty_baseline_file(self, json_store, baseline_set):
        json_store.save("render-moderate", baseline_set)
        (json_store.sets_dir / "render-moderate.json").write_text(json.dumps({"results": []}))

        with pytest.raises(BaselineStorageError):
            json_store.load("render-moderate")

    def test_delete(self, json_store, baseline_set):
        json_store.save("render-moderate", baseline_set)

        assert json_store.delete("render-moderate")
        assert not json_store.exists("render-moderate")
        assert json_store.keys() == []

    def test_invalid_key(self, json_store, baseline_set):
        with pytest.raises(ValueError):
            json_store.save("../outside", baseline_set)

    def test_save_result(self, json_store):
        path = json_store.save_result("render-moderate", {"verdict": "no-change"})

        assert path.parent == json_store.results_dir
        assert json.loads(path.read_text()) == {"verdict": "no-change"}

    def test_summary(self, json_store, baseline_set, current_set):
        json_store.save("a", baseline_set)
        json_store.save("b", current_set)
        summary = json_store.get_summary()

        assert summary["total_baselines"] == 2
        assert set(summary["baselines"]) == {"a", "b"}
