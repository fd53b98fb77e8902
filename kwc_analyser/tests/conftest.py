"""
Pytest configuration and fixtures for kwc_analyser tests
"""

import json

import pytest

from kwc_analyser.filters import RegexLineFilter
from kwc_analyser.types import KeywordCountConfig


ALICE_TEXT = (
    '"But I don\'t want to go among mad people," Alice remarked.\n'
    '"Oh, you can\'t help that," said the Cat: "we\'re all mad here. I\'m mad. You\'re mad."\n'
    '"How do you know I\'m mad?" said Alice.\n'
    '"You must be," said the Cat, "or you wouldn\'t have come here."\n'
    'The Cat vanished, and she walked on towards the house of the March Hare,\n'
    'though she would rather have visited the Hatter instead; "he is mad, too," she thought.\n'
)


@pytest.fixture
def alice_keywords():
    """Keywords for the Alice in Wonderland paragraph"""
    return ["Alice", "Cat", "March Hare", "Hatter", "mad"]


@pytest.fixture
def alice_file(tmp_path):
    """Sample paragraph from Alice in Wonderland"""
    path = tmp_path / "alice.txt"
    path.write_text(ALICE_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def test_keywords():
    """Test keywords for keyword counting tests"""
    return ["foo", "bar", "baz"]


@pytest.fixture
def subjects_dir(tmp_path):
    """Directory holding two small text files"""
    subjects = tmp_path / "subjects"
    subjects.mkdir()
    (subjects / "foo.txt").write_text("foo\nthe foo met a baz\n", encoding="utf-8")
    (subjects / "bar.txt").write_text("bar bar\nnothing here\n", encoding="utf-8")
    return subjects


@pytest.fixture
def keywords_file(tmp_path, test_keywords):
    """JSON keyword file using the default key name"""
    path = tmp_path / "keywords.json"
    path.write_text(json.dumps({"keywords": test_keywords}), encoding="utf-8")
    return path


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def output_path(tmp_path):
    """Report location inside a directory that does not exist yet"""
    return tmp_path / "output" / "nested" / "results.json"


@pytest.fixture
def make_config(subjects_dir, keywords_file, output_path):
    """Factory for configs pointing at the temporary fixtures"""
    def _make(**overrides):
        options = {
            "target": subjects_dir,
            "keywords_list": keywords_file,
            "output_path": output_path,
            "line_filter": "regex",
            "max_workers": 2,
        }
        options.update(overrides)
        return KeywordCountConfig(**options)
    return _make


@pytest.fixture
def regex_filter():
    return RegexLineFilter()
