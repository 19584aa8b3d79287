#!/usr/bin/env python3
"""
CLI for exploring the NPL Insights engine from a terminal
"""
import logging

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from npl_insights.config import settings
from npl_insights.loaders import DatasetLoadError, load_datasets
from npl_insights.engine.aggregation import aggregate_players, league_overview, season_average_score
from npl_insights.engine.crosstab import (
    average_toss_win_rate,
    head_to_head,
    season_comparison,
    toss_decision_rates,
)
from npl_insights.engine.filters import RecordFilter, filter_records, unique_seasons
from npl_insights.engine import ranking
from npl_insights.engine.shot_model import shot_distribution
from npl_insights.teams import get_team_short_name

console = Console()


def _load(ctx: click.Context):
    """Load the datasets once per invocation; exit 1 if any table is missing"""
    if ctx.obj.get("datasets") is None:
        try:
            ctx.obj["datasets"] = load_datasets(ctx.obj["data_dir"])
        except DatasetLoadError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            ctx.exit(1)
    return ctx.obj["datasets"]


def _print_leaderboard(title: str, entries, value_label: str, value_format: str = "{:.0f}"):
    if not entries:
        console.print(f"[red]No players qualify for '{title}'.[/red]")
        return

    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Player", style="cyan")
    table.add_column("Team", style="magenta")
    table.add_column("M", justify="right")
    table.add_column("Runs", justify="right")
    table.add_column("Wkts", justify="right")
    table.add_column(value_label, justify="right", style="green")

    for e in entries:
        table.add_row(
            str(e.rank),
            e.player_name,
            get_team_short_name(e.team),
            str(e.player.matches),
            str(e.player.runs),
            str(e.player.wickets),
            value_format.format(e.value),
        )

    console.print(table)


@click.group()
@click.option("--data-dir", default=None, help="Directory holding the CSV datasets")
@click.option("--log-level", default=settings.LOG_LEVEL, help="Logging level")
@click.pass_context
def cli(ctx: click.Context, data_dir: str, log_level: str):
    """NPL Insights - Cricket League Analytics"""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.INFO))
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir or settings.DATA_DIR


@cli.command()
@click.pass_context
def overview(ctx: click.Context):
    """Headline league totals"""
    datasets = _load(ctx)
    o = league_overview(datasets.master)

    console.print(Panel("[bold]League Overview[/bold]"))
    console.print(f"[cyan]Matches:[/cyan] {o.total_matches}")
    console.print(f"[cyan]Players:[/cyan] {o.total_players}")
    console.print(f"[cyan]Teams:[/cyan] {o.total_teams}")
    console.print(f"[cyan]Runs:[/cyan] {o.total_runs}")
    console.print(f"[cyan]Wickets:[/cyan] {o.total_wickets}")
    console.print(f"[cyan]Fours / Sixes:[/cyan] {o.total_fours} / {o.total_sixes}")

    console.print("\n[bold]Average Match Score by Season:[/bold]")
    for season in unique_seasons(datasets.master):
        console.print(f"  Season {season}: {season_average_score(datasets.master, season):.0f}")


@cli.command()
@click.option("--season", type=int, default=None, help="Season number")
@click.option("--team", default=None, help="Team name")
@click.option("--limit", default=settings.DEFAULT_LEADERBOARD_LIMIT, help="Number of rows")
@click.pass_context
def batsmen(ctx: click.Context, season: int, team: str, limit: int):
    """Top run scorers"""
    aggregates = aggregate_players(_load(ctx).master, RecordFilter(season=season, team=team))
    _print_leaderboard("Top Batsmen", ranking.top_batsmen(aggregates, limit), "Runs")


@cli.command()
@click.option("--season", type=int, default=None, help="Season number")
@click.option("--team", default=None, help="Team name")
@click.option("--limit", default=settings.DEFAULT_LEADERBOARD_LIMIT, help="Number of rows")
@click.pass_context
def bowlers(ctx: click.Context, season: int, team: str, limit: int):
    """Top wicket takers"""
    aggregates = aggregate_players(_load(ctx).master, RecordFilter(season=season, team=team))
    _print_leaderboard("Top Bowlers", ranking.top_bowlers(aggregates, limit), "Wkts")


@cli.command()
@click.option("--season", type=int, default=None, help="Season number")
@click.option("--team", default=None, help="Team name")
@click.option("--limit", default=settings.DEFAULT_LEADERBOARD_LIMIT, help="Number of rows")
@click.pass_context
def all_rounders(ctx: click.Context, season: int, team: str, limit: int):
    """All-rounders by runs + wickets x 25"""
    aggregates = aggregate_players(_load(ctx).master, RecordFilter(season=season, team=team))
    _print_leaderboard("Top All-Rounders", ranking.top_all_rounders(aggregates, limit), "Score")


@cli.command()
@click.option("--season", type=int, default=None, help="Season number")
@click.option("--team", default=None, help="Team name")
@click.pass_context
def best_players(ctx: click.Context, season: int, team: str):
    """Player of the match for every match"""
    rows = filter_records(_load(ctx).master, RecordFilter(season=season, team=team))
    best = ranking.best_player_per_match(rows)

    table = Table(title=f"Best Player per Match ({len(best)} matches)")
    table.add_column("Match")
    table.add_column("Date")
    table.add_column("Player", style="cyan")
    table.add_column("Team", style="magenta")
    table.add_column("Bat", justify="right")
    table.add_column("Bowl", justify="right")
    table.add_column("Field", justify="right")
    table.add_column("Total", justify="right", style="green")

    for c in best:
        table.add_row(
            c.match_id_unique,
            c.match_date,
            c.player_name,
            get_team_short_name(c.team),
            str(c.batting_points),
            str(c.bowling_points),
            str(c.fielding_points),
            str(c.total_points),
        )

    console.print(table)


@cli.command("head-to-head")
@click.pass_context
def head_to_head_matrix(ctx: click.Context):
    """Team vs team wins-losses grid"""
    matrix = head_to_head(_load(ctx).master)
    teams = sorted(set(matrix.teams()) | {o for t in matrix.teams() for o in matrix.oppositions(t)})

    table = Table(title="Head to Head (row team W-L against column team)")
    table.add_column("Team", style="cyan")
    for team in teams:
        table.add_column(get_team_short_name(team), justify="center")

    for team in teams:
        cells = []
        for opposition in teams:
            if team == opposition:
                cells.append("-")
                continue
            rec = matrix.lookup(team, opposition)
            cells.append(f"{rec.wins}-{rec.losses}")
        table.add_row(get_team_short_name(team), *cells)

    console.print(table)


@cli.command()
@click.argument("team")
@click.option("--season", type=int, default=None, help="Season number")
@click.option("--metric", type=click.Choice(ranking.PARETO_METRICS), default="runs")
@click.option("--top", "top_n", default=settings.PARETO_TOP_N, help="Players in the subset")
@click.pass_context
def pareto(ctx: click.Context, team: str, season: int, metric: str, top_n: int):
    """Cumulative contribution of a team's top players"""
    entries = ranking.pareto_contributors(_load(ctx).master, team, metric, top_n, RecordFilter(season=season))
    if not entries:
        console.print(f"[red]No data for team '{team}'.[/red]")
        return

    table = Table(title=f"{team} - {metric} contribution")
    table.add_column("Player", style="cyan")
    table.add_column(metric.title(), justify="right")
    table.add_column("Cumulative %", justify="right", style="green")

    for e in entries:
        marker = " *" if e.cumulative_pct <= 80 else ""
        table.add_row(e.player_name, f"{e.value:.0f}", f"{e.cumulative_pct}%{marker}")

    console.print(table)
    console.print("[dim]* within the first 80% of the top-subset total[/dim]")


@cli.command()
@click.option("--season", type=int, default=None, help="Season number")
@click.option("--team", default=None, help="Team name")
@click.option("--player", default=None, help="Player name")
@click.option("--match", default=None, help="Match id")
@click.pass_context
def shots(ctx: click.Context, season: int, team: str, player: str, match: str):
    """Simulated shot distribution over the twelve field zones"""
    rows = filter_records(_load(ctx).master, RecordFilter(season, team, player, match))
    distribution = shot_distribution(rows)

    table = Table(title="Shot Distribution")
    table.add_column("Zone", style="cyan")
    table.add_column("Runs", justify="right")
    table.add_column("4s", justify="right")
    table.add_column("6s", justify="right")
    table.add_column("Outs", justify="right", style="red")

    for z in distribution.zones:
        table.add_row(z.label, str(z.runs), str(z.fours), str(z.sixes), str(z.dismissals))

    console.print(table)
    console.print(f"[green]Strongest zone:[/green] {distribution.strongest_zone.label}")
    console.print(f"[green]Best six zone:[/green] {distribution.best_six_zone.label}")
    console.print(f"[red]Danger zone:[/red] {distribution.danger_zone.label}")


@cli.command()
@click.pass_context
def toss(ctx: click.Context):
    """Toss outcome and decision win rates"""
    datasets = _load(ctx)

    console.print(Panel("[bold]Toss Impact[/bold]"))
    for t in datasets.toss_impact:
        console.print(f"  {t.toss_status}: {t.win_rate:.1f}% of {t.total_matches} matches")
    console.print(f"[cyan]Average:[/cyan] {average_toss_win_rate(datasets.toss_impact):.1f}%")

    console.print("\n[bold]By Toss Decision:[/bold]")
    for rate in toss_decision_rates(datasets.match_outcomes).values():
        console.print(f"  {rate.decision or 'unknown'}: {rate.wins}/{rate.total} ({rate.win_rate:.1f}%)")


@cli.command()
@click.option("--season-a", default=1, help="Earlier season")
@click.option("--season-b", default=2, help="Later season")
@click.pass_context
def seasons(ctx: click.Context, season_a: int, season_b: int):
    """Compare each team's record between two seasons"""
    comparisons = season_comparison(_load(ctx).match_outcomes, season_a, season_b)

    table = Table(title=f"Season {season_a} vs Season {season_b}")
    table.add_column("Team", style="cyan")
    table.add_column(f"S{season_a} W-L", justify="center")
    table.add_column(f"S{season_a} Win %", justify="right")
    table.add_column(f"S{season_b} W-L", justify="center")
    table.add_column(f"S{season_b} Win %", justify="right")
    table.add_column("Change", justify="right")

    for c in comparisons:
        colour = "green" if c.improvement >= 0 else "red"
        table.add_row(
            get_team_short_name(c.team),
            f"{c.season_a_wins}-{c.season_a_losses}",
            f"{c.season_a_win_rate:.1f}",
            f"{c.season_b_wins}-{c.season_b_losses}",
            f"{c.season_b_win_rate:.1f}",
            f"[{colour}]{c.improvement:+.1f}[/{colour}]",
        )

    console.print(table)


if __name__ == "__main__":
    cli(obj={})
