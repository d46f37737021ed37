import os

import pytest

from Translator.Utility.languages import get_language_name
from Translator.Utility.validators import validate_query_args
from Translator.Utility.env import load_env_file, get_timeout, get_attempts, get_api_root
from Translator.Model.SuggestionItem import SuggestionItem


def test_language_lookup():
    assert get_language_name("es") == "Spanish"
    assert get_language_name("zh-CN") == "Chinese Simplified"
    assert get_language_name("xx") is None
    assert get_language_name(None) is None


def test_validate_query_args():
    request = validate_query_args(" en ", "es", " hello world ")
    assert request.source_language == "en"
    assert request.query == "hello world"
    assert request.target_display_name is None


def test_validate_query_args_missing_target():
    with pytest.raises(ValueError):
        validate_query_args("en", "", "hello")


def test_suggestion_item_omits_unset_fields():
    assert SuggestionItem(title="a", subtitle="b").to_dict() == {"title": "a", "subtitle": "b"}
    assert SuggestionItem(title="a", subtitle="b", autocomplete="a").to_dict() == {
        "title": "a", "subtitle": "b", "autocomplete": "a"}


def test_load_env_file(monkeypatch, tmp_path):
    monkeypatch.setattr(os, "environ", {"TRANSLATE_ATTEMPTS": "5"})
    env_file = tmp_path / ".env"
    env_file.write_text('# settings\nexport TRANSLATE_TIMEOUT="2.5"\nTRANSLATE_ATTEMPTS=1\nnot a pair\n', encoding="utf-8")
    loaded = load_env_file(str(env_file))
    assert loaded == {"TRANSLATE_TIMEOUT": "2.5"}
    assert get_timeout() == 2.5
    assert get_attempts() == 5


def test_settings_defaults(monkeypatch):
    for key in ("TRANSLATE_API_ROOT", "TRANSLATE_TIMEOUT", "TRANSLATE_ATTEMPTS"):
        monkeypatch.delenv(key, raising=False)
    assert get_api_root() == "https://translate.googleapis.com"
    assert get_timeout() == 10.0
    assert get_attempts() == 3


def test_invalid_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("TRANSLATE_TIMEOUT", "soon")
    assert get_timeout() == 10.0


def test_missing_env_file(tmp_path):
    assert load_env_file(str(tmp_path / "missing.env")) == {}
