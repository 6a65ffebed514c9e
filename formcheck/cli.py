"""Defines the command-line interface for formcheck.

This module uses the `click` library to expose the validators from a shell:
checking a single value, checking a whole form file, and managing the
user-level configuration.
"""
import json
import logging
import sys
from typing import Any, Dict, List, Mapping, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .core.config import Config
from .core.form import FormResult, load_form, validate_form
from .core.result import ValidationResult
from .core.validator import get_validator, validator_registry
from .exceptions import FormCheckError

console = Console(emoji=True)

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """A command group that also resolves short aliases and unique prefixes.

    Aliases are given when the group is declared, e.g.
    ``@click.group(cls=AliasedGroup, aliases={"c": "check"})``. Lookup is
    case-insensitive: an exact name wins, then an alias, then a prefix
    that matches exactly one command.
    """

    def __init__(self, *args, aliases: Optional[Dict[str, str]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.aliases = {alias.lower(): target.lower() for alias, target in (aliases or {}).items()}

    def _candidates(self, ctx: click.Context, name: str) -> List[str]:
        if name in self.commands:
            return [name]
        if name in self.aliases:
            return [self.aliases[name]]
        return sorted(cmd for cmd in self.list_commands(ctx) if cmd.startswith(name))

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        candidates = self._candidates(ctx, cmd_name.lower())
        if len(candidates) > 1:
            ctx.fail(f"Ambiguous command: '{cmd_name}'. Matches: {', '.join(candidates)}")
        return super().get_command(ctx, candidates[0]) if candidates else None


def _parse_scalar(raw: str) -> Any:
    """Casts a command-line string to a bool, int or float where it looks like one."""
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if lowered in ("inf", "infinity"):
        return float("inf")
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


def _parse_options(pairs: Tuple[str, ...], defaults: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Parses repeated `key=value` options into a dict.

    Args:
        pairs: The raw `--option` values.
        defaults: The validator's `DEFAULT_OPTIONS`. Options whose default
            is a string keep their raw text, so `custom_message=123` stays
            a message rather than becoming a number.

    Returns:
        A dict of option names to cast values. Dashes in names become
        underscores, so `min-length=8` and `min_length=8` are the same.
    """
    defaults = defaults or {}
    options: Dict[str, Any] = {}
    for pair in pairs:
        if "=" not in pair:
            raise click.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--option")
        key, value = pair.split("=", 1)
        key = key.strip().replace("-", "_")
        value = value.strip()
        options[key] = value if isinstance(defaults.get(key), str) else _parse_scalar(value)
    return options


def _apply_config_verbosity(config: Config) -> None:
    """Raises formcheck's own log level to INFO when the config asks for verbose output."""
    package_logger = logging.getLogger("formcheck")
    if config.get("verbose") and package_logger.getEffectiveLevel() > logging.INFO:
        package_logger.setLevel(logging.INFO)


def _coerce_value(field_type: str, raw: str) -> Any:
    """Converts the command-line value to what the field's validator expects."""
    if field_type == "checkbox":
        return raw.lower() in ("true", "1", "yes", "on", "checked")
    return raw


def _display_result(field_type: str, value: str, result: ValidationResult) -> None:
    """Displays a single validation result as a panel."""
    if result.is_valid:
        console.print(Panel(f"'{escape(value)}' is a valid {field_type} value.", style="green", title="Valid"))
    else:
        console.print(Panel(escape(result.error_message), style="red", title="Invalid"))


def _display_form_result(result: FormResult) -> None:
    """Displays a form's validation results as a table and a summary panel."""
    if not result.fields:
        console.print("[yellow]No fields were validated.[/yellow]")
        return

    table = Table(title="Form Validation")
    table.add_column("Field", style="cyan")
    table.add_column("Status")
    table.add_column("Message")
    for name, field_result in result.fields.items():
        status = "[green]Passed[/green]" if field_result.is_valid else "[red]Failed[/red]"
        table.add_row(escape(name), status, escape(field_result.error_message))
    console.print(table)

    failed = len(result.error_messages)
    if failed:
        console.print(Panel(f"Found {failed} invalid field(s).", style="red", title="Validation Complete"))
    else:
        console.print(Panel("All fields are valid.", style="green", title="Validation Complete"))


def _wants_json(json_output: bool, config: Config) -> bool:
    return json_output or config.get("output") == "json"


@click.group(
    cls=AliasedGroup,
    aliases={"c": "check", "f": "form", "ls": "list"},
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="formcheck")
@click.option("--verbose", is_flag=True, help="Enable verbose output.")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """Validate form input from the command line.

    formcheck checks single values (emails, text, numbers, checkboxes,
    radio groups and passwords) or whole forms described in TOML or JSON
    files, reporting every failing field at once.
    """
    log_level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=log_level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger.debug("Debug mode enabled.")

    if ctx.invoked_subcommand is None:
        console.print("Use 'formcheck check <type> <value>' to validate a value, or 'formcheck --help' for more commands.")


@main.command()
@click.argument("field_type", type=click.Choice(sorted(validator_registry())))
@click.argument("value", type=str)
@click.option("--option", "-o", "option_pairs", multiple=True, metavar="KEY=VALUE", help="A validator option, e.g. -o min_length=8. Repeatable.")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def check(field_type: str, value: str, option_pairs: Tuple[str, ...], config_path: Optional[str], json_output: bool) -> None:
    """Validate a single VALUE as a field of FIELD_TYPE.

    Exits with status 1 if the value is invalid.
    """
    config_obj = Config(config_path=config_path)
    _apply_config_verbosity(config_obj)
    validator_cls = get_validator(field_type)
    options = _parse_options(option_pairs, validator_cls.DEFAULT_OPTIONS)
    try:
        validator = validator_cls(options, config=config_obj)
    except FormCheckError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    result = validator.validate(_coerce_value(field_type, value))

    if _wants_json(json_output, config_obj):
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _display_result(field_type, value, result)

    if not result.is_valid:
        sys.exit(1)


@main.command()
@click.argument("form_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False), help="Path to config file.")
@click.option("--json", "json_output", is_flag=True, help="Output results in JSON format.")
def form(form_file: str, config_path: Optional[str], json_output: bool) -> None:
    """Validate every field of a form defined in FORM_FILE (.toml or .json).

    Exits with status 1 if any field is invalid or the file is malformed.
    """
    config_obj = Config(config_path=config_path)
    _apply_config_verbosity(config_obj)
    try:
        fields, values = load_form(form_file)
        result = validate_form(fields, values, config=config_obj)
    except FormCheckError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if _wants_json(json_output, config_obj):
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        _display_form_result(result)

    if not result.is_valid:
        sys.exit(1)


@main.command(name="list")
def list_validators() -> None:
    """List the available field types and their validators."""
    table = Table(title="Available Validators")
    table.add_column("Type", style="cyan")
    table.add_column("Validator")
    table.add_column("Category")
    table.add_column("Description")
    for field_type, validator in sorted(validator_registry().items()):
        table.add_row(field_type, validator.name, validator.category, validator.description)
    console.print(table)


@main.command()
@click.argument("action", type=click.Choice(['get', 'set', 'list', 'reset']), required=True)
@click.argument("key", type=str, required=False)
@click.argument("value", type=str, required=False)
def config(action: str, key: Optional[str], value: Optional[str]) -> None:
    """Show or edit formcheck settings.

    `get` and `list` show the merged settings. `set` and `reset` change
    only the user file (~/.config/formcheck/config.toml).

    \b
    ACTION:
        get <key>         Get a configuration value.
        set <key> <value> Store a value in the user file.
        list              List all current configuration values.
        reset             Reset the configuration to its default state.
    """
    config_obj = Config()
    if action == "list":
        console.print(Panel(json.dumps(config_obj.config, indent=2), title="Current Configuration"))
    elif action == "get":
        if not key:
            console.print("[red]Error: 'get' action requires a key.[/red]")
            sys.exit(1)
        click.echo(json.dumps(config_obj.get(key)))
    elif action == "set":
        if not key or value is None:
            console.print("[red]Error: 'set' action requires a key and a value.[/red]")
            sys.exit(1)
        if key in ("disable_validators", "enable_validators"):
            processed_value: Any = [v.strip() for v in value.split(",") if v.strip()]
        elif key.endswith(".custom_message") or key == "output":
            processed_value = value
        else:
            processed_value = _parse_scalar(value)
        try:
            Config.set_user_value(key, processed_value)
        except IOError as e:
            console.print(f"[red]Error saving configuration: {escape(str(e))}[/red]")
            sys.exit(1)
        console.print(f"[green]'{escape(key)}' set to '{escape(str(processed_value))}' in the user config.[/green]")
    elif action == "reset":
        if Config.reset_user_config():
            console.print("[green]Configuration reset to defaults.[/green]")
        else:
            console.print("[yellow]No user configuration file to reset.[/yellow]")


if __name__ == "__main__":
    main()
