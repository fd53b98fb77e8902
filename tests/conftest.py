"""
Shared pytest fixtures for the keyword count application tests.
"""

import json

import pytest


@pytest.fixture
def subjects_dir(tmp_path):
    subjects = tmp_path / "subjects"
    subjects.mkdir()
    (subjects / "foo.txt").write_text("Alice met the Cat\n", encoding="utf-8")
    (subjects / "bar.txt").write_text("the cat is mad, mad\n", encoding="utf-8")
    return subjects


@pytest.fixture
def keywords_file(tmp_path):
    path = tmp_path / "keywords.json"
    path.write_text(json.dumps({"keywords": ["Alice", "Cat", "mad"]}), encoding="utf-8")
    return path


@pytest.fixture
def output_file(tmp_path):
    return tmp_path / "out" / "results.json"
