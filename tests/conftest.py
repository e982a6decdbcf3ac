"""
Shared pytest fixtures for AutoUI tests.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from autoui.questionnaire import SchemaLoader
from fixtures import SAMPLE_SCHEMA_DICT


@pytest.fixture
def schema():
    return SchemaLoader().from_dict(SAMPLE_SCHEMA_DICT)


@pytest.fixture
def answers_path(tmp_path):
    return str(tmp_path / "answers.json")
