#!/usr/bin/env python3
"""
Tests for AI name generation with a stub client (no network).
"""

from types import SimpleNamespace

import pytest
from openai import OpenAIError

from ai import AIConfig, NameGenerationError, generate_names, list_models, parse_names
from ai.name_generator import SYSTEM_PROMPT, build_user_prompt, strip_code_fence
from core import FileEntry


class StubCompletions:
    """Records the request and replies with fixed content"""

    def __init__(self, content=None, exc=None):
        self.content = content
        self.exc = exc
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc:
            raise self.exc
        if self.content is None:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class StubModels:
    def __init__(self, items):
        self.items = items
        self.queries = []

    def list(self, extra_query=None):
        self.queries.append(extra_query)
        return iter(self.items)


def make_client(content=None, exc=None, models=()):
    completions = StubCompletions(content, exc)
    return SimpleNamespace(
        chat=SimpleNamespace(completions=completions),
        models=StubModels(list(models)),
    )


FILES = [FileEntry.from_path("/tmp/测试文件1.txt"), FileEntry.from_path("/tmp/photo.jpg")]
CONFIG = AIConfig(api_key="sk-test")


def test_generate_names_sends_prompt_and_parses_reply():
    client = make_client('["新测试文件1", "new_photo"]')

    names = generate_names(FILES, "添加新前缀", CONFIG, client=client)

    assert names == ["新测试文件1", "new_photo"]
    call = client.chat.completions.calls[0]
    assert call["model"] == "deepseek-ai/DeepSeek-V3"
    assert call["temperature"] == 0.7
    assert call["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    user = call["messages"][1]["content"]
    assert "原文件名: 测试文件1 (扩展名: .txt)" in user
    assert "原文件名: photo (扩展名: .jpg)" in user
    assert "用户需求：添加新前缀" in user


def test_generate_names_uses_configured_model():
    client = make_client('["a", "b"]')
    generate_names(FILES, "x", AIConfig(api_key="k", model="my-model"), client=client)
    assert client.chat.completions.calls[0]["model"] == "my-model"


def test_generate_names_strips_markdown_fence():
    client = make_client('```json\n["a", "b"]\n```')
    assert generate_names(FILES, "x", CONFIG, client=client) == ["a", "b"]


@pytest.mark.parametrize(
    "config, files, instruction",
    [
        (AIConfig(), FILES, "x"),
        (CONFIG, [], "x"),
        (CONFIG, FILES, "   "),
    ],
)
def test_generate_names_validates_input_before_calling(config, files, instruction):
    client = make_client('["a", "b"]')
    with pytest.raises(NameGenerationError):
        generate_names(files, instruction, config, client=client)
    assert client.chat.completions.calls == []


def test_generate_names_count_mismatch():
    client = make_client('["only one"]')
    with pytest.raises(NameGenerationError, match="1 names for 2 input files"):
        generate_names(FILES, "x", CONFIG, client=client)


def test_generate_names_wraps_api_errors():
    client = make_client(exc=OpenAIError("connection refused"))
    with pytest.raises(NameGenerationError, match="AI API call failed"):
        generate_names(FILES, "x", CONFIG, client=client)


def test_generate_names_no_choices():
    client = make_client(content=None)
    with pytest.raises(NameGenerationError, match="no result"):
        generate_names(FILES, "x", CONFIG, client=client)


@pytest.mark.parametrize("content", ["not json", '{"a": 1}', '[1, 2]'])
def test_parse_names_rejects_malformed(content):
    with pytest.raises(NameGenerationError):
        parse_names(content, 2)


def test_strip_code_fence_plain_fence():
    assert strip_code_fence('```\n["a"]\n```') == '["a"]'
    assert strip_code_fence('  ["a"]  ') == '["a"]'


def test_build_user_prompt_lists_every_file():
    prompt = build_user_prompt(FILES, "需求")
    assert prompt.count("原文件名:") == 2


def test_list_models():
    items = [
        SimpleNamespace(id="deepseek-ai/DeepSeek-V3", object="model", created=1, owned_by="deepseek"),
        SimpleNamespace(id="Qwen/Qwen2.5-7B-Instruct", object="model", created=2, owned_by="qwen"),
    ]
    client = make_client(models=items)

    models = list_models(CONFIG, model_type="text", client=client)

    assert [m.id for m in models] == ["deepseek-ai/DeepSeek-V3", "Qwen/Qwen2.5-7B-Instruct"]
    assert models[0].owned_by == "deepseek"
    assert client.models.queries == [{"type": "text"}]


def test_list_models_requires_key():
    with pytest.raises(NameGenerationError):
        list_models(AIConfig(), client=make_client())
