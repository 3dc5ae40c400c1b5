#!/usr/bin/env python3
"""
Command-line interface for the combat log toolkit.
"""

import logging
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .analysis import (
    damage_by_source,
    entropy,
    healing_by_source,
    letis_d_of_one,
    probabilities,
    simpsons_d,
    simpsons_d_of_one,
)
from .config import SEGMENTATION_METHODS, get_settings, load_and_apply_config
from .filters import HostileFilter, PlayerSourceFilter
from .parser import CombatLog
from .segmentation import get_segmenter

# Set up rich console for pretty output
console = Console()

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
    format="%(message)s",
    handlers=[RichHandler(console=console, rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option("--config", "config_path", type=click.Path(), default=None, help="YAML configuration file")
def cli(verbose, config_path):
    """Combat Log Toolkit - encounters, damage and healing from WoW combat logs"""
    load_and_apply_config(config_path)
    settings = get_settings()
    logging.getLogger().setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    settings.validate()
    settings.log_configuration()


def load_log(log_file) -> CombatLog:
    log_path = Path(log_file)
    console.print(f"[bold green]Parsing combat log:[/bold green] {log_path.name}")
    return CombatLog.read_file(log_path)


def segment_log(log: CombatLog, method=None):
    method = method or get_settings().segmentation.method
    segmenter = get_segmenter(method)
    encounters = segmenter.segment(log.events)
    return encounters, segmenter.warnings


def select_events(log: CombatLog, encounter_number):
    """Events of the whole log, or of one encounter (1-based)."""
    if encounter_number is None:
        return log.events, "whole log"

    encounters, _ = segment_log(log)
    if not 1 <= encounter_number <= len(encounters):
        raise click.BadParameter(
            f"log has {len(encounters)} encounters", param_hint="--encounter"
        )
    return encounters[encounter_number - 1].events, f"encounter {encounter_number}"


@cli.command()
@click.argument("log_file", type=click.Path(exists=True))
@click.option("--method", type=click.Choice(SEGMENTATION_METHODS), default=None, help="Segmentation method")
def parse(log_file, method):
    """Parse a combat log file and report basic statistics."""
    start_time = datetime.now()
    log = load_log(log_file)
    encounters, warnings = segment_log(log, method)
    processing_time = (datetime.now() - start_time).total_seconds()

    console.print("\n[bold cyan]═══ Parsing Complete ═══[/bold cyan]")

    stats_table = Table(title="Parsing Statistics", show_header=False)
    stats_table.add_column("Metric", style="cyan")
    stats_table.add_column("Value", style="white")

    stats_table.add_row("Total Events", f"{len(log):,}")
    stats_table.add_row("Parse Errors", str(len(log.parse_errors)))
    stats_table.add_row("Units", str(len(log.units())))
    stats_table.add_row("Encounters", str(len(encounters)))
    stats_table.add_row("Anomalies", str(len(warnings)))
    stats_table.add_row("Processing Time", f"{processing_time:.2f}s")

    console.print(stats_table)

    if log.parse_errors:
        console.print(f"\n[yellow]First parse errors ({min(len(log.parse_errors), 10)} shown):[/yellow]")
        for error in log.parse_errors[:10]:
            console.print(f"  [dim]{escape(str(error))}[/dim]")


@cli.command()
@click.argument("log_file", type=click.Path(exists=True))
@click.option("--method", type=click.Choice(SEGMENTATION_METHODS), default=None, help="Segmentation method")
@click.option("--units", "show_units", is_flag=True, help="List the units involved in each encounter")
def encounters(log_file, method, show_units):
    """List the encounters found in a combat log."""
    log = load_log(log_file)
    found, _ = segment_log(log, method)

    enc_table = Table(title=f"\n[bold]Encounters ({len(found)})[/bold]")
    enc_table.add_column("#", style="dim", width=3)
    enc_table.add_column("Start", width=12)
    enc_table.add_column("Duration", width=8)
    enc_table.add_column("Events", justify="right")
    enc_table.add_column("Players", justify="right")
    enc_table.add_column("Hostiles", justify="right")
    enc_table.add_column("Damage", justify="right")

    for i, enc in enumerate(found, 1):
        total_damage = sum(
            amount for unit, amount in damage_by_source(enc.events).items() if unit.is_player
        )
        enc_table.add_row(
            str(i),
            enc.start_time.strftime("%H:%M:%S"),
            enc.get_duration_str(),
            f"{len(enc):,}",
            str(len(enc.players)),
            str(len(enc.hostiles)),
            f"{total_damage:,}",
        )

    console.print(enc_table)

    if show_units:
        for i, enc in enumerate(found, 1):
            console.print(f"\n[bold]Encounter {i}[/bold]: {len(enc.involved)} units involved")
            for unit in sorted(enc.involved, key=lambda u: (not u.is_player, u.name)):
                style = "green" if unit.is_player else "red"
                console.print(f"  [{style}]{escape(str(unit))}[/{style}]")


def display_totals(title, totals, limit):
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Unit", width=24)
    table.add_column("ID", style="dim")
    table.add_column("Amount", justify="right", style="bold")
    table.add_column("Share", justify="right")

    grand_total = sum(totals.values())
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    for i, (unit, amount) in enumerate(ranked[:limit], 1):
        share = amount / grand_total * 100 if grand_total else 0.0
        style = "green" if unit.is_player else "red"
        table.add_row(str(i), f"[{style}]{unit.name}[/{style}]", f"{unit.id:x}", f"{amount:,}", f"{share:.1f}%")

    console.print(table)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True))
@click.option("--encounter", "encounter_number", type=int, default=None, help="Only this encounter (1-based)")
@click.option("--hostile-only", is_flag=True, help="Only count damage between opposing sides")
@click.option("--limit", default=20, show_default=True, help="Number of units shown")
def damage(log_file, encounter_number, hostile_only, limit):
    """Show damage done per unit."""
    log = load_log(log_file)
    events, scope = select_events(log, encounter_number)
    if hostile_only:
        events = CombatLog(events).and_(HostileFilter())
    display_totals(f"Damage Done ({scope})", damage_by_source(events), limit)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True))
@click.option("--encounter", "encounter_number", type=int, default=None, help="Only this encounter (1-based)")
@click.option("--limit", default=20, show_default=True, help="Number of units shown")
def healing(log_file, encounter_number, limit):
    """Show healing done per unit."""
    log = load_log(log_file)
    events, scope = select_events(log, encounter_number)
    display_totals(f"Healing Done ({scope})", healing_by_source(events), limit)


@cli.command()
@click.argument("log_file", type=click.Path(exists=True))
@click.option("--encounter", "encounter_number", type=int, default=None, help="Only this encounter (1-based)")
def diversity(log_file, encounter_number):
    """Show how evenly damage is spread among players."""
    log = load_log(log_file)
    events, scope = select_events(log, encounter_number)
    player_events = CombatLog(events).and_(PlayerSourceFilter())
    totals = damage_by_source(player_events)

    if len(totals) < 2:
        console.print(f"[yellow]Need at least two damage dealing players, found {len(totals)}[/yellow]")
        return

    ranked = sorted(totals.values())
    probs = probabilities(ranked)

    table = Table(title=f"Damage Diversity ({scope})", show_header=False)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Players", str(len(totals)))
    table.add_row("Simpson's D", f"{simpsons_d(probs):.4f}")
    table.add_row("Simpson's D (normalised)", f"{simpsons_d_of_one(probs):.4f}")
    table.add_row("Leti's D (normalised)", f"{letis_d_of_one(probs):.4f}")
    table.add_row("Entropy (bits)", f"{entropy(probs):.4f}")
    console.print(table)


if __name__ == "__main__":
    cli()
