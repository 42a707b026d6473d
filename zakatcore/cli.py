"""Flask CLI commands for methodology management and calculation."""
import json

import click
from flask import current_app
from flask.cli import with_appcontext

from zakatcore.methodology import UnknownMethodologyError
from zakatcore.methodology.loader import policy_from_json
from zakatcore.services.calc import calculate_zakat
from zakatcore.services.difference import compare_methodologies
from zakatcore.services.snapshot import FinancialSnapshot, check_snapshot


def _registry():
    return current_app.extensions['methodology_registry']


def _get_policy(methodology_id):
    try:
        return _registry().get(methodology_id)
    except UnknownMethodologyError as e:
        raise click.BadParameter(str(e)) from None


@click.command('list-methodologies')
@with_appcontext
def list_methodologies_command():
    """List registered methodologies."""
    registry = _registry()
    for key, policy in registry.items():
        marker = '*' if key == registry.default_id else ' '
        click.echo(f'{marker} {key:<14} {policy.meta.name} (v{policy.meta.version}, {policy.meta.tier})')


@click.command('validate-methodology')
@click.argument('path', type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def validate_methodology_command(path):
    """Validate a methodology JSON document.

    Exits with status 1 when the document would be rejected.
    """
    with open(path, 'r', encoding='utf-8') as f:
        result = policy_from_json(f.read())

    if result.is_valid:
        click.echo(f'Valid: {result.policy.id} v{result.policy.meta.version}')
        return

    click.echo(f'Invalid methodology ({len(result.errors)} errors):', err=True)
    for error in result.errors:
        click.echo(f'  {error}', err=True)
    click.get_current_context().exit(1)


@click.command('compare-methodologies')
@click.argument('a')
@click.argument('b')
@with_appcontext
def compare_methodologies_command(a, b):
    """Compare two registered methodologies side by side."""
    differences = compare_methodologies(_get_policy(a), _get_policy(b))
    click.echo(f"{'':<26} {a:<40} {b}")
    for row in differences:
        marker = '!' if row.is_different else ' '
        click.echo(f'{marker} {row.category + " (" + row.label + ")":<24} {row.verdict_a:<40} {row.verdict_b}')


@click.command('calculate')
@click.argument('snapshot_path', type=click.Path(exists=True, dir_okay=False))
@click.option('--silver-price', type=float, default=None, help='Silver price per troy ounce')
@click.option('--gold-price', type=float, default=None, help='Gold price per troy ounce')
@click.option('--methodology', default=None, help='Registered methodology id')
@with_appcontext
def calculate_command(snapshot_path, silver_price, gold_price, methodology):
    """Calculate zakat for a snapshot JSON file and print the result as JSON."""
    with open(snapshot_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise click.ClickException('Snapshot file must contain a JSON object')

    errors = check_snapshot(data)
    if errors:
        raise click.ClickException('Invalid snapshot: ' + '; '.join(errors))

    snapshot = FinancialSnapshot.from_dict(data)
    methodology_id = methodology or snapshot.methodology or _registry().default_id
    policy = _get_policy(methodology_id)

    if silver_price is None:
        silver_price = current_app.config['DEFAULT_SILVER_PRICE_PER_OUNCE']
    if gold_price is None:
        gold_price = current_app.config['DEFAULT_GOLD_PRICE_PER_OUNCE']

    result = calculate_zakat(snapshot, silver_price, gold_price, policy)
    click.echo(json.dumps(result.to_dict(), indent=2))


def register_cli(app):
    """Register CLI commands with the Flask app."""
    app.cli.add_command(list_methodologies_command)
    app.cli.add_command(validate_methodology_command)
    app.cli.add_command(compare_methodologies_command)
    app.cli.add_command(calculate_command)
