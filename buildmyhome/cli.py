import click
from flask.cli import with_appcontext

from buildmyhome.catalog_seed import seed_catalog
from buildmyhome.domain.enums import HouseType, InteriorType, MaterialCategory
from buildmyhome.domain.estimation import estimate_breakdown
from buildmyhome.domain.home_configuration import ConfigurationError, HomeConfiguration
from buildmyhome.extensions import db


@click.command('seed-catalog')
@click.option('--create-tables', is_flag=True, help='Create missing tables first (development only).')
@with_appcontext
def seed_catalog_command(create_tables: bool) -> None:
    """Insert the sample packages, materials and projects (idempotent)."""
    if create_tables:
        db.create_all()

    try:
        created = seed_catalog()
    except Exception as exc:
        raise click.ClickException(f'Seeding failed: {exc}')

    click.echo(
        f"Seeded {created['packages']} package(s), "
        f"{created['materials']} material(s), {created['projects']} project(s)."
    )


@click.command('estimate-cost')
@click.option('--land', 'land_area', type=int, required=True, help='Land area in square feet')
@click.option('--floors', type=int, default=1, show_default=True)
@click.option('--bedrooms', type=int, default=2, show_default=True)
@click.option('--bathrooms', type=int, default=2, show_default=True)
@click.option('--house-type', type=click.Choice(HouseType.ALL), default=HouseType.MODERN, show_default=True)
@click.option('--interior', 'interior_type', type=click.Choice(InteriorType.ALL), default=None)
@click.option(
    '--material',
    'materials',
    type=click.Choice(MaterialCategory.ALL),
    multiple=True,
    help='Material category with a selection (repeatable)',
)
def estimate_cost_command(land_area, floors, bedrooms, bathrooms, house_type, interior_type, materials) -> None:
    """Print the cost breakdown for a configuration."""
    payload = {
        'landAreaSqFt': land_area,
        'floors': floors,
        'bedrooms': bedrooms,
        'bathrooms': bathrooms,
        'houseType': house_type,
        'interiorType': interior_type,
        'materials': {category: 'selected' for category in materials},
    }
    try:
        config = HomeConfiguration.from_estimate_payload(payload)
    except ConfigurationError as exc:
        raise click.BadParameter(exc.message, param_hint=exc.field)

    breakdown = estimate_breakdown(config)
    click.echo(f'Base cost:           {breakdown.base:>12,}')
    click.echo(f'Floor multiplier:    {breakdown.floor_multiplier:>12.2f}')
    click.echo(f'Type multiplier:     {breakdown.type_multiplier:>12.2f}')
    click.echo(f'Interior multiplier: {breakdown.interior_multiplier:>12.2f}')
    click.echo(f'Materials factor:    {breakdown.materials_factor:>12.2f}')
    click.echo(f'Estimated cost (Rs): {breakdown.total:>12,}')
