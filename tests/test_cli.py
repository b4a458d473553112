"""Flask CLI commands."""

from buildmyhome.models import Material, Package, Project


def test_seed_catalog_is_idempotent(runner):
    result = runner.invoke(args=['seed-catalog'])
    assert result.exit_code == 0
    assert 'Seeded 3 package(s), 6 material(s), 3 project(s).' in result.output

    result = runner.invoke(args=['seed-catalog'])
    assert 'Seeded 0 package(s), 0 material(s), 0 project(s).' in result.output
    assert Package.query.count() == 3
    assert Material.query.count() == 6
    assert Project.query.count() == 3


def test_estimate_cost_command(runner):
    result = runner.invoke(args=[
        'estimate-cost', '--land', '1200', '--floors', '2',
        '--interior', 'premium', '--material', 'flooring',
    ])
    assert result.exit_code == 0
    assert '3,993,000' in result.output


def test_estimate_cost_rejects_small_land(runner):
    result = runner.invoke(args=['estimate-cost', '--land', '50'])
    assert result.exit_code != 0
