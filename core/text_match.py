"""
text_match.py - Name Transformation Tools

Provides glob filtering and the rule-based name transforms
"""

from fnmatch import fnmatchcase

from .models_fs import CaseMode, PatternRule


def matches_pattern(name: str, pattern: str) -> bool:
    """
    Check if filename matches glob pattern

    Args:
        name: Filename (with suffix)
        pattern: Shell glob, empty or "*" matches everything

    Returns:
        Whether matches
    """
    if not pattern or pattern == "*":
        return True
    return fnmatchcase(name, pattern)


def replace_text(text: str, old: str, new: str) -> str:
    """
    Replace every occurrence of old with new

    Args:
        text: Original text
        old: String to replace
        new: Replacement string

    Returns:
        Replaced text
    """
    if not old:
        return text
    return text.replace(old, new)


def apply_case(text: str, mode: CaseMode) -> str:
    """Apply case transform (title only touches the first character)"""
    if mode is CaseMode.LOWER:
        return text.lower()
    if mode is CaseMode.UPPER:
        return text.upper()
    if mode is CaseMode.TITLE:
        return text[:1].upper() + text[1:].lower()
    return text


def sequence_number(rule: PatternRule, ordinal: int) -> int:
    """
    Number for the ordinal-th matched file

    A step of 0 still counts up by one.
    """
    step = rule.number_step if rule.number_step != 0 else 1
    return rule.number_start + ordinal * step


def transform_name(stem: str, suffix: str, rule: PatternRule, ordinal: int) -> str:
    """
    Compute the candidate stem for one matched file

    Order: replace -> case -> prefix/suffix -> numbering.

    Args:
        stem: Filename without suffix
        suffix: File extension (not part of the returned stem)
        rule: Rename rule
        ordinal: Index among matched files (skipped files do not count)

    Returns:
        New stem, without extension
    """
    new_stem = replace_text(stem, rule.replace_from, rule.replace_to)
    new_stem = apply_case(new_stem, rule.case_mode)
    new_stem = f"{rule.prefix}{new_stem}{rule.suffix}"

    if rule.numbering_enabled:
        new_stem = f"{new_stem}_{sequence_number(rule, ordinal)}"

    return new_stem


def candidate_name(stem: str, suffix: str, rule: PatternRule, ordinal: int) -> str:
    """Candidate filename including the original extension"""
    return transform_name(stem, suffix, rule, ordinal) + suffix
