"""
prompt_templates.py - Prompt Template Persistence

Named instructions for AI renaming. Without a saved file the built-in
templates are returned.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import List, Optional

from .config_store import ConfigError, get_config_dir

logger = logging.getLogger(__name__)

TEMPLATES_FILE_NAME = "prompt_templates.json"


@dataclass
class PromptTemplate:
    """Named prompt"""
    name: str
    content: str


def default_templates() -> List[PromptTemplate]:
    """Built-in templates"""
    return [
        PromptTemplate("日期+文件名+序号", "按照今天日期+源文件名称+序号命名，格式：YYYYMMDD_原文件名_序号"),
        PromptTemplate("文件名+序号", "在文件名后添加序号，格式：原文件名_序号"),
        PromptTemplate("日期+序号", "使用今天日期和序号命名，格式：YYYYMMDD_序号"),
        PromptTemplate("序号+文件名", "在文件名前添加序号，格式：序号_原文件名"),
        PromptTemplate("清理文件名", "清理文件名中的特殊字符和多余空格，保留中文、英文、数字和基本标点"),
        PromptTemplate("统一小写", "将文件名转换为小写，并保持文件扩展名不变"),
        PromptTemplate("统一大写", "将文件名转换为大写，并保持文件扩展名不变"),
        PromptTemplate("首字母大写", "将文件名首字母大写，其余小写，并保持文件扩展名不变"),
    ]


def _templates_path(config_dir: Optional[Path]) -> Path:
    return Path(config_dir or get_config_dir()) / TEMPLATES_FILE_NAME


def load_templates(config_dir: Optional[Path] = None) -> List[PromptTemplate]:
    """
    Load prompt templates

    Raises:
        ConfigError: File exists but cannot be read or parsed
    """
    path = _templates_path(config_dir)
    if not path.exists():
        return default_templates()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        items = data.get("templates") or []
        return [PromptTemplate(name=str(t["name"]), content=str(t["content"])) for t in items]
    except OSError as e:
        raise ConfigError(f"Failed to read template file {path}: {e}") from e
    except (ValueError, AttributeError, KeyError, TypeError) as e:
        raise ConfigError(f"Failed to parse template file {path}: {e}") from e


def save_templates(templates: List[PromptTemplate], config_dir: Optional[Path] = None) -> Path:
    """Save prompt templates, returns the file written"""
    path = _templates_path(config_dir)
    data = {"templates": [asdict(t) for t in templates]}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to write template file {path}: {e}") from e

    logger.info("Saved %d prompt templates to %s", len(templates), path)
    return path


def find_template(templates: List[PromptTemplate], name: str) -> Optional[PromptTemplate]:
    """Look up a template by name"""
    for t in templates:
        if t.name == name:
            return t
    return None
