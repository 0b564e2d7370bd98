"""Config inspection and editing commands."""

from pathlib import Path

import click
import yaml

from ..completions import complete_config_key
from ..config import (
    get_config_file,
    get_manifest_path,
    load_config,
    save_config,
    set_manifest_path,
    set_verbosity,
)
from ..search import ScorerConfig, ScorerUsageError
from ..search.levenshtein import ALGORITHMS
from ..utils import load_scorer_config, log_info

BOOLEAN_KEYS = ("case_sensitive", "dry_run")


@click.command()
@click.pass_context
def show(ctx):
    """Show the config file and the settings in effect."""
    config = load_config()
    log_info(f"Config file: {get_config_file()}")
    manifest = get_manifest_path(ctx.obj.get("manifest"))
    log_info(f"Manifest:    {manifest or '(not found)'}")

    scorer = load_scorer_config()
    log_info(f"Scorer:      {scorer.algorithm}"
             f" ({'case-sensitive' if scorer.case_sensitive else 'ignore case'})")
    log_info(f"Weights:     deletion={scorer.deletion:g} insertion={scorer.insertion:g}"
             f" substitution={scorer.substitution:g} match={scorer.match:g}"
             f" first_match_bonus={scorer.first_match_bonus:g}"
             f" consecutive_bonus={scorer.consecutive_bonus:g}")
    if config:
        log_info("")
        log_info(yaml.dump(config, default_flow_style=False).rstrip())


@click.command(name="set")
@click.argument("key", shell_complete=complete_config_key)
@click.argument("value")
def set_value(key: str, value: str):
    """Set a config KEY to VALUE.

    \b
    Keys: manifest, verbosity (0-3), scorer (alignment|distance),
          case_sensitive, dry_run, weights.<name>

    Examples:
        lmkdir config set scorer distance
        lmkdir config set weights.consecutive_bonus 5
    """
    parsed = yaml.safe_load(value)

    if key == "manifest":
        set_manifest_path(Path(value).expanduser())
    elif key == "verbosity":
        if not isinstance(parsed, int):
            raise click.BadParameter("must be an integer 0-3", param_hint="VALUE")
        try:
            set_verbosity(parsed)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="VALUE")
    elif key == "scorer":
        if value not in ALGORITHMS:
            raise click.BadParameter(f"must be one of: {', '.join(ALGORITHMS)}", param_hint="VALUE")
        _store(key, value)
    elif key in BOOLEAN_KEYS:
        if not isinstance(parsed, bool):
            raise click.BadParameter("must be true or false", param_hint="VALUE")
        _store(key, parsed)
    elif key.startswith("weights."):
        _store_weight(key.split(".", 1)[1], parsed)
    else:
        raise click.BadParameter(f"unknown key '{key}'", param_hint="KEY")

    log_info(click.style(f"Set {key} = {value}", fg="green"))


def _store(key: str, value) -> None:
    config = load_config()
    config[key] = value
    save_config(config)


def _store_weight(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise click.BadParameter("weights must be numbers", param_hint="VALUE")

    config = load_config()
    weights = dict(config.get("weights") or {})
    weights[name] = value
    # Validate before writing so a bad weight never lands in the file.
    try:
        ScorerConfig.from_dict(weights)
    except ScorerUsageError as e:
        raise click.BadParameter(str(e), param_hint="KEY")
    config["weights"] = weights
    save_config(config)


@click.group()
def config():
    """Inspect and edit lmkdir settings.

    Settings live in $XDG_CONFIG_HOME/lmkdir/config.yaml.
    """
    pass


config.add_command(show)
config.add_command(set_value)
