"""
Tests for the JSON answer store.
"""

import json
import os

import pytest

from autoui.exceptions import InputError
from autoui.questionnaire import AnswerStore


class TestAnswerStore:
    """Test answer persistence."""

    def test_missing_file_is_empty(self, answers_path):
        assert AnswerStore(answers_path).load() == {}

    def test_save_and_load(self, answers_path):
        store = AnswerStore(answers_path)
        store.save({"product_name": "Acme", "brand_tone": "__SKIP__"})

        assert store.load() == {"product_name": "Acme", "brand_tone": "__SKIP__"}
        with open(answers_path, encoding="utf-8") as f:
            assert json.load(f)["product_name"] == "Acme"
        assert not os.path.exists(f"{answers_path}.backup")

    def test_merge_and_save_keeps_prior_keys(self, answers_path):
        store = AnswerStore(answers_path)
        store.save({"product_name": "Old", "offer_type": "waitlist"})

        merged = store.merge_and_save({"product_name": "New"})

        assert merged == {"product_name": "New", "offer_type": "waitlist"}
        assert store.load() == merged

    def test_invalid_json(self, answers_path):
        with open(answers_path, "w", encoding="utf-8") as f:
            f.write("{not json")
        with pytest.raises(InputError):
            AnswerStore(answers_path).load()

    def test_non_object_root(self, answers_path):
        with open(answers_path, "w", encoding="utf-8") as f:
            json.dump(["product_name"], f)
        with pytest.raises(InputError):
            AnswerStore(answers_path).load()

    def test_reset(self, answers_path):
        store = AnswerStore(answers_path)
        store.save({"product_name": "Acme"})
        store.reset()
        assert store.load() == {}
        store.reset()
