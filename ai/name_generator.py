"""
name_generator.py - AI Filename Generation

Asks an OpenAI-compatible chat completion endpoint for one new stem per file.
The config is passed in on every call; nothing is kept between calls.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from openai import OpenAI, OpenAIError

from core import FileEntry
from .config_store import AIConfig

logger = logging.getLogger(__name__)

TEMPERATURE = 0.7

SYSTEM_PROMPT = """你是一个文件重命名助手。用户会提供一批文件的原始文件名，你需要根据用户的需求为每个文件生成一个新的文件名（不含扩展名）。

要求：
1. 只返回新文件名，不要包含扩展名
2. 文件名应该简洁、有意义、符合用户需求
3. 返回JSON数组格式，数组中的每个元素对应一个文件的新文件名
4. 数组顺序必须与输入的文件顺序完全一致
5. 只返回JSON数组，不要有其他说明文字

示例输入：
原文件名: 测试文件1 (扩展名: .txt)
原文件名: 测试文件2 (扩展名: .jpg)

示例输出（如果用户要求添加"新"前缀）：
["新测试文件1", "新测试文件2"]"""

USER_PROMPT = """文件列表：
{file_list}

用户需求：{instruction}

请根据用户需求为每个文件生成新文件名，返回JSON数组格式。"""


class NameGenerationError(Exception):
    """Remote name generation failed, no names were produced"""


@dataclass
class ModelInfo:
    """Model entry from the /models endpoint"""
    id: str
    object: str = ""
    created: int = 0
    owned_by: str = ""


def make_client(config: AIConfig) -> OpenAI:
    """Create a client for the configured endpoint (no automatic retries)"""
    return OpenAI(api_key=config.api_key, base_url=config.effective_base_url(), max_retries=0)


def build_user_prompt(files: Sequence[FileEntry], instruction: str) -> str:
    """User message listing every file stem and extension"""
    file_list = "\n".join(f"原文件名: {f.stem} (扩展名: {f.suffix})" for f in files)
    return USER_PROMPT.format(file_list=file_list, instruction=instruction)


def strip_code_fence(content: str) -> str:
    """Remove a Markdown ```json fence around the reply"""
    content = content.strip()
    if content.startswith("```json"):
        content = content[len("```json"):]
    elif content.startswith("```"):
        content = content[3:]
    if content.endswith("```"):
        content = content[:-3]
    return content.strip()


def parse_names(content: str, expected: int) -> List[str]:
    """
    Parse the model reply into a list of stems

    Args:
        content: Raw reply text
        expected: Number of input files

    Returns:
        New stems in input order

    Raises:
        NameGenerationError: Not a JSON array of strings, or wrong length
    """
    text = strip_code_fence(content)
    try:
        names = json.loads(text)
    except ValueError as e:
        raise NameGenerationError(f"Failed to parse AI result: {e}, raw content: {text}") from e

    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise NameGenerationError(f"AI result is not a JSON array of strings: {text}")

    if len(names) != expected:
        raise NameGenerationError(
            f"AI returned {len(names)} names for {expected} input files"
        )
    return names


def generate_names(
    files: Sequence[FileEntry],
    instruction: str,
    config: AIConfig,
    client: Optional[Any] = None
) -> List[str]:
    """
    Generate new stems for files

    Args:
        files: Files to rename
        instruction: What the user wants the names to look like
        config: Endpoint settings
        client: OpenAI-compatible client, created from config when None

    Returns:
        One stem per file, same order

    Raises:
        NameGenerationError: Missing settings, request failure or bad reply
    """
    if not config.api_key:
        raise NameGenerationError("Please set the AI API key first")
    if not files:
        raise NameGenerationError("File list is empty")
    if not instruction or not instruction.strip():
        raise NameGenerationError("Prompt cannot be empty")

    if client is None:
        client = make_client(config)

    model = config.effective_model()
    logger.info("Requesting %d names from %s", len(files), model)

    try:
        resp = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": build_user_prompt(files, instruction)},
            ],
            temperature=TEMPERATURE,
        )
    except OpenAIError as e:
        raise NameGenerationError(f"AI API call failed: {e}") from e

    if not resp.choices:
        raise NameGenerationError("AI returned no result")

    content = resp.choices[0].message.content or ""
    return parse_names(content, len(files))


def list_models(
    config: AIConfig,
    model_type: str = "",
    client: Optional[Any] = None
) -> List[ModelInfo]:
    """
    List models available at the configured endpoint

    Args:
        config: Endpoint settings
        model_type: Optional provider-specific filter (sent as ?type=)
        client: OpenAI-compatible client, created from config when None

    Raises:
        NameGenerationError: Missing API key or request failure
    """
    if not config.api_key:
        raise NameGenerationError("Please set the AI API key first")

    if client is None:
        client = make_client(config)

    extra_query = {"type": model_type} if model_type else None
    try:
        page = client.models.list(extra_query=extra_query)
        models = [
            ModelInfo(
                id=m.id,
                object=getattr(m, "object", "") or "",
                created=getattr(m, "created", 0) or 0,
                owned_by=getattr(m, "owned_by", "") or "",
            )
            for m in page
        ]
    except OpenAIError as e:
        raise NameGenerationError(f"Failed to fetch model list: {e}") from e

    logger.info("Fetched %d models from %s", len(models), config.effective_base_url())
    return models
