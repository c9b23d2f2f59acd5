"""
cli_entry.py - CLI Entry Point

Supports:
- Rule-based rename
- AI rename
- AI settings, model list and prompt templates
"""

import argparse
import sys
from typing import List

from core import (
    FileEntry, PatternRule, CaseMode, RenamePlan, RenameError,
    collect_files, plan_pattern_rename, plan_external_rename, execute_rename,
)
from ai import (
    ConfigError, NameGenerationError,
    PromptTemplate, load_config, save_config, load_templates, save_templates, find_template,
    generate_names, list_models,
)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = argparse.ArgumentParser(
        prog="file-renaming",
        description="Batch Rename Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add a prefix to every .txt file in a folder
  python main.py --cli rule ./docs --recursive --pattern "*.txt" --prefix "new_"

  # Upper case with numbering starting at 1
  python main.py --cli rule a.jpg b.jpg --case upper --number-start 1 --number-step 1

  # Let the AI rename files
  python main.py --cli ai ./photos -r --prompt "按拍摄内容命名"

  # Save AI settings
  python main.py --cli config set --api-key sk-... --model deepseek-ai/DeepSeek-V3

  # Save a prompt template and use it
  python main.py --cli templates add photos "按拍摄内容命名"
  python main.py --cli ai ./photos -r --template photos
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Subcommands")

    # rule subcommand
    rule_parser = subparsers.add_parser("rule", help="Rule-based rename")
    rule_parser.add_argument("paths", nargs="+", help="Files or folders")
    rule_parser.add_argument("--recursive", "-r", action="store_true", help="Include files inside folders")
    rule_parser.add_argument("--pattern", "-p", type=str, default="", help="Glob filter, e.g. *.txt")
    rule_parser.add_argument("--from", dest="replace_from", type=str, default="", help="String to replace")
    rule_parser.add_argument("--to", dest="replace_to", type=str, default="", help="Replacement string")
    rule_parser.add_argument("--prefix", type=str, default="", help="Prefix")
    rule_parser.add_argument("--suffix", type=str, default="", help="Suffix (before the extension)")
    rule_parser.add_argument("--case", type=str, default="none",
                             choices=["none", "lower", "upper", "title"], help="Case transform")
    rule_parser.add_argument("--number-start", type=int, default=0, help="Starting number")
    rule_parser.add_argument("--number-step", type=int, default=0, help="Number step")
    rule_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    rule_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    # ai subcommand
    ai_parser = subparsers.add_parser("ai", help="AI rename")
    ai_parser.add_argument("paths", nargs="+", help="Files or folders")
    ai_parser.add_argument("--recursive", "-r", action="store_true", help="Include files inside folders")
    prompt_group = ai_parser.add_mutually_exclusive_group(required=True)
    prompt_group.add_argument("--prompt", type=str, help="Naming instruction")
    prompt_group.add_argument("--template", "-t", type=str, help="Name of a saved prompt template")
    ai_parser.add_argument("--dry-run", "-d", action="store_true", help="Preview only, do not execute")
    ai_parser.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")

    # models subcommand
    models_parser = subparsers.add_parser("models", help="List available AI models")
    models_parser.add_argument("--type", dest="model_type", type=str, default="", help="Model type filter")

    # config subcommand
    config_parser = subparsers.add_parser("config", help="Show or change AI settings")
    config_sub = config_parser.add_subparsers(dest="action")
    config_sub.add_parser("show", help="Show current settings")
    set_parser = config_sub.add_parser("set", help="Change settings")
    set_parser.add_argument("--api-key", type=str, help="API key")
    set_parser.add_argument("--base-url", type=str, help="API base URL")
    set_parser.add_argument("--model", type=str, help="Model name")

    # templates subcommand
    templates_parser = subparsers.add_parser("templates", help="List or edit prompt templates")
    templates_sub = templates_parser.add_subparsers(dest="action")
    templates_sub.add_parser("list", help="List templates (default)")
    add_parser = templates_sub.add_parser("add", help="Add a template or replace one with the same name")
    add_parser.add_argument("name", help="Template name")
    add_parser.add_argument("content", help="Naming instruction")
    remove_parser = templates_sub.add_parser("remove", help="Remove a template")
    remove_parser.add_argument("name", help="Template name")

    return parser


def print_plan(plan: RenamePlan) -> None:
    """Show preview"""
    print()
    print(f"Will perform {plan.total_count} rename operations:")
    print("-" * 80)
    for entry in plan.entries[:20]:
        note = f" ({entry.note})" if entry.note else ""
        print(f"  {entry.source.name:<40} -> {entry.target.name}{note}")
    if len(plan.entries) > 20:
        print(f"  ... and {len(plan.entries) - 20} more operations")
    print("-" * 80)

    if plan.failures:
        print("Cannot rename:")
        for _, msg in plan.failures:
            print(f"  - {msg}")


def confirm_and_execute(plan: RenamePlan, args) -> int:
    """Preview, confirm and execute a plan"""
    if not plan.entries and not plan.failures:
        print("No files need renaming")
        return 0

    print_plan(plan)

    if args.dry_run:
        print("\n[Preview mode] Will not actually execute")
        return 0

    if plan.entries and not args.yes:
        confirm = input("\nConfirm execution? (y/N): ").strip().lower()
        if confirm != 'y':
            print("Cancelled")
            return 0

    print("\nExecuting...")
    result = execute_rename(plan)
    print(result.summary())

    return 0 if result.ok else 1


def gather_files(args) -> List[FileEntry]:
    files = collect_files(args.paths, recursive=args.recursive)
    if files:
        print(f"Found {len(files)} files")
    return files


def cmd_rule(args):
    """Handle rule command"""
    files = gather_files(args)
    if not files:
        print("No matching files found")
        return 0

    rule = PatternRule(
        pattern=args.pattern,
        replace_from=args.replace_from,
        replace_to=args.replace_to,
        prefix=args.prefix,
        suffix=args.suffix,
        case_mode=CaseMode.parse(args.case),
        number_start=args.number_start,
        number_step=args.number_step,
    )
    plan = plan_pattern_rename(files, rule)
    return confirm_and_execute(plan, args)


def cmd_ai(args):
    """Handle ai command"""
    config = load_config()

    instruction = args.prompt
    if args.template:
        template = find_template(load_templates(), args.template)
        if template is None:
            print(f"Error: Prompt template not found: {args.template}")
            return 1
        instruction = template.content

    files = gather_files(args)
    if not files:
        print("No matching files found")
        return 0

    print(f"Asking {config.effective_model()} for new names...")
    names = generate_names(files, instruction, config)
    plan = plan_external_rename(files, names)
    return confirm_and_execute(plan, args)


def cmd_models(args):
    """Handle models command"""
    models = list_models(load_config(), model_type=args.model_type)
    if not models:
        print("No models returned")
        return 0

    for m in models:
        owner = f"  ({m.owned_by})" if m.owned_by else ""
        print(f"  {m.id}{owner}")
    return 0


def _mask(key: str) -> str:
    if len(key) <= 8:
        return "*" * len(key)
    return f"{key[:4]}...{key[-4:]}"


def cmd_config(args):
    """Handle config command"""
    config = load_config()

    if args.action == "set":
        if args.api_key is not None:
            if not args.api_key:
                print("Error: API key cannot be empty")
                return 1
            config.api_key = args.api_key
        if args.base_url is not None:
            config.base_url = args.base_url
        if args.model is not None:
            if not args.model:
                print("Error: Model name cannot be empty")
                return 1
            config.model = args.model
        path = save_config(config)
        print(f"Saved to {path}")

    print(f"API key:  {_mask(config.api_key) or '(not set)'}")
    print(f"Base URL: {config.effective_base_url()}")
    print(f"Model:    {config.effective_model()}")
    return 0


def cmd_templates(args):
    """Handle templates command"""
    templates = load_templates()

    if args.action == "add":
        if not args.name.strip() or not args.content.strip():
            print("Error: Template name and content cannot be empty")
            return 1
        existing = find_template(templates, args.name)
        if existing is not None:
            existing.content = args.content
        else:
            templates.append(PromptTemplate(args.name, args.content))
        path = save_templates(templates)
        print(f"Saved template \"{args.name}\" to {path}")
        return 0

    if args.action == "remove":
        if find_template(templates, args.name) is None:
            print(f"Error: Prompt template not found: {args.name}")
            return 1
        path = save_templates([t for t in templates if t.name != args.name])
        print(f"Removed template \"{args.name}\" from {path}")
        return 0

    for t in templates:
        print(f"  {t.name:<20} {t.content}")
    return 0


COMMANDS = {
    "rule": cmd_rule,
    "ai": cmd_ai,
    "models": cmd_models,
    "config": cmd_config,
    "templates": cmd_templates,
}


def main(argv=None):
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (RenameError, NameGenerationError, ConfigError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
