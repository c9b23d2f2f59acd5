#!/usr/bin/env python3
"""
Tests for AI settings and prompt template persistence.
"""

import json

import pytest

from ai import (
    AIConfig, ConfigError, DEFAULT_BASE_URL, DEFAULT_MODEL, PromptTemplate,
    default_templates, find_template, load_config, load_templates, save_config, save_templates,
)


def test_missing_config_is_empty(tmp_path):
    config = load_config(tmp_path)
    assert config == AIConfig()
    assert config.effective_base_url() == DEFAULT_BASE_URL
    assert config.effective_model() == DEFAULT_MODEL


def test_config_round_trip_uses_camel_case_keys(tmp_path):
    path = save_config(AIConfig(api_key="sk-1", base_url="https://example.com/v1", model="m"), tmp_path)
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "apiKey": "sk-1",
        "baseURL": "https://example.com/v1",
        "model": "m",
    }
    assert load_config(tmp_path) == AIConfig("sk-1", "https://example.com/v1", "m")


def test_save_creates_missing_directory(tmp_path):
    target = tmp_path / "nested" / "FileRenaming"
    save_config(AIConfig(api_key="k"), target)
    assert load_config(target).api_key == "k"


def test_malformed_config_raises(tmp_path):
    (tmp_path / "ai_config.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_config_with_invalid_utf8_raises(tmp_path):
    (tmp_path / "ai_config.json").write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_missing_templates_gives_eight_defaults(tmp_path):
    templates = load_templates(tmp_path)
    assert len(templates) == 8
    assert templates == default_templates()
    assert templates[0].name == "日期+文件名+序号"


def test_templates_round_trip(tmp_path):
    saved = [PromptTemplate("短名", "用简短的中文命名"), PromptTemplate("b", "c")]
    path = save_templates(saved, tmp_path)
    assert "短名" in path.read_text(encoding="utf-8")
    assert load_templates(tmp_path) == saved


def test_empty_template_file_is_an_empty_list(tmp_path):
    save_templates([], tmp_path)
    assert load_templates(tmp_path) == []


def test_malformed_templates_raise(tmp_path):
    (tmp_path / "prompt_templates.json").write_text('{"templates": [{"name": "x"}]}', encoding="utf-8")
    with pytest.raises(ConfigError):
        load_templates(tmp_path)


def test_find_template():
    templates = default_templates()
    assert find_template(templates, "统一大写").content.startswith("将文件名转换为大写")
    assert find_template(templates, "nope") is None
