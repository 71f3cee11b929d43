"""Player lookup commands."""

import click


@click.group()
@click.pass_context
def player(ctx):
    """Player search and shots-to-30 lookups."""
    pass


@player.command()
@click.argument('query')
@click.pass_context
def search(ctx, query):
    """Search active players by name."""
    from shotsto30.stats_client import StatsClient

    client = StatsClient(config=ctx.obj.get('config'))
    outcome = client.search_players(query)

    if outcome.error:
        click.echo(click.style(outcome.error, fg='red'))
    if not outcome.players:
        click.echo(click.style("No players found.", fg='yellow'))
        return

    for p in outcome.players:
        click.echo(f"{p.id:>10}  {p.display_name or p.full_name}")


@player.command()
@click.argument('player_id', type=int)
@click.pass_context
def shots(ctx, player_id):
    """Show how many shots a player needs to score 30."""
    from shotsto30.helpers.shots import calculate
    from shotsto30.stats_client import StatsClient

    client = StatsClient(config=ctx.obj.get('config'))
    stats = client.fetch_player_season_averages(player_id)
    if stats is None:
        click.echo(click.style(f"  No season data for player {player_id}", fg='yellow'))
        raise SystemExit(1)

    result = calculate(stats)
    if result is None:
        click.echo(click.style("  Player has no field goal attempts or points this season.", fg='yellow'))
        raise SystemExit(1)

    click.echo(f"{result.player_name.strip() or player_id} needs {result.shots} shots to score 30")
    click.echo(f"  ({result.pts} PPG, {result.fga} FGA)")
