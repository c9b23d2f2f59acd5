"""
ai - AI Naming Collaborators

Settings and prompt template persistence, and the remote name generator
"""

from .config_store import (
    AIConfig,
    ConfigError,
    load_config,
    save_config,
    get_config_dir,
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
)

from .prompt_templates import (
    PromptTemplate,
    default_templates,
    load_templates,
    save_templates,
    find_template,
)

from .name_generator import (
    NameGenerationError,
    ModelInfo,
    generate_names,
    list_models,
    parse_names,
)

__all__ = [
    "AIConfig",
    "ConfigError",
    "load_config",
    "save_config",
    "get_config_dir",
    "DEFAULT_BASE_URL",
    "DEFAULT_MODEL",
    "PromptTemplate",
    "default_templates",
    "load_templates",
    "save_templates",
    "find_template",
    "NameGenerationError",
    "ModelInfo",
    "generate_names",
    "list_models",
    "parse_names",
]
