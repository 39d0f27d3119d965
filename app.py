from flask import Flask, request, jsonify, abort
import click

from config import get_config
from constants import MAX_LENGTHS, MAX_RECIPES_PER_LIST, VALID_KINDS, VALID_SYSTEMS
from models import Kind, Quantity, System
from services import (
    MeasurementError, default_registry, format_shopping_qty,
    generate_shopping_list, load_recipe, parse, parse_recipe, render, scale,
    total,
)
from utils import setup_logging, get_logger, sanitize_item_name

app = Flask(__name__)
app.config.from_object(get_config())

setup_logging(app.config['LOG_LEVEL'])
logger = get_logger(__name__)


# ============================================
# HELPERS
# ============================================

def _json_body():
    """Request body as a dict, or 400."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400, description='Request body must be a JSON object')
    return data


def _system(value):
    """Display system from a request value, falling back to the configured default."""
    value = value or app.config['DEFAULT_SYSTEM']
    if not isinstance(value, str):
        abort(400, description='Field system must be a string')
    value = value.lower()
    if value not in VALID_SYSTEMS:
        abort(400, description=f"Unknown system {value!r}")
    return System(value)


def _text_field(data, name, max_length=None):
    value = data.get(name)
    if not isinstance(value, str) or not value.strip():
        abort(400, description=f"Field {name!r} must be a non-empty string")
    if max_length and len(value) > max_length:
        abort(400, description=f"Field {name!r} is longer than {max_length} characters")
    return value


def _factor(value):
    """
    Exact factor from JSON.

    JSON numbers arrive as floats; their decimal text is parsed exactly so
    1.5 means 3/2.
    """
    if isinstance(value, bool) or value is None:
        abort(400, description='Field factor must be a number or text like "1 1/2"')
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (int, str)):
        return value
    abort(400, description='Field factor must be a number or text like "1 1/2"')


def _quantity_json(quantity, system):
    result = quantity.to_dict()
    result['display'] = render(quantity, system)
    return result


# ============================================
# ERROR HANDLERS
# ============================================

@app.errorhandler(MeasurementError)
def measurement_error(e):
    logger.info(f"Rejected request to {request.path}: {type(e).__name__}: {e}")
    return jsonify(error=type(e).__name__, message=str(e)), 400


@app.errorhandler(400)
def bad_request(e):
    return jsonify(error='BadRequest', message=e.description), 400


# ============================================
# ROUTES - MEASUREMENTS
# ============================================

@app.route('/api/units')
def units():
    """Accepted spellings and display labels per kind and system."""
    registry = default_registry()
    display = {
        kind.value: {
            system.value: [u.label for u in registry.ordered_units(kind, system)]
            for system in System
        }
        for kind in Kind
    }
    return jsonify(spellings=sorted(registry.spellings), display=display)


@app.route('/api/parse', methods=['POST'])
def parse_route():
    data = _json_body()
    quantity = parse(_text_field(data, 'text', MAX_LENGTHS['measurement_text']))
    return jsonify(_quantity_json(quantity, _system(data.get('system'))))


@app.route('/api/render', methods=['POST'])
def render_route():
    data = _json_body()
    kind = data.get('kind')
    magnitude = data.get('magnitude')
    if not isinstance(kind, str) or kind not in VALID_KINDS:
        abort(400, description=f"Unknown kind {kind!r}")
    if isinstance(magnitude, bool) or not isinstance(magnitude, int):
        abort(400, description='Field magnitude must be an integer')
    quantity = Quantity(Kind(kind), magnitude)
    return jsonify(display=render(quantity, _system(data.get('system'))))


@app.route('/api/scale', methods=['POST'])
def scale_route():
    data = _json_body()
    measured = parse(_text_field(data, 'text', MAX_LENGTHS['measurement_text']))
    quantity = scale(measured, _factor(data.get('factor')))
    return jsonify(_quantity_json(quantity, _system(data.get('system'))))


@app.route('/api/add', methods=['POST'])
def add_route():
    data = _json_body()
    measurements = data.get('measurements')
    if not isinstance(measurements, list) or not measurements:
        abort(400, description='Field measurements must be a non-empty list')
    if not all(isinstance(m, str) for m in measurements):
        abort(400, description='Every measurement must be a string')
    if any(len(m) > MAX_LENGTHS['measurement_text'] for m in measurements):
        abort(400, description=f"Measurements are limited to {MAX_LENGTHS['measurement_text']} characters")
    quantity = total(parse(m) for m in measurements)
    return jsonify(_quantity_json(quantity, _system(data.get('system'))))


# ============================================
# ROUTES - SHOPPING LIST
# ============================================

@app.route('/api/shopping-list', methods=['POST'])
def shopping_list_route():
    """Merge the ingredients of one or more recipe documents."""
    data = _json_body()
    documents = data.get('recipes')
    if not isinstance(documents, list) or not documents:
        abort(400, description='Field recipes must be a non-empty list')
    if len(documents) > MAX_RECIPES_PER_LIST:
        abort(400, description=f"At most {MAX_RECIPES_PER_LIST} recipes per list")

    multipliers = data.get('multipliers')
    if multipliers is not None:
        if not isinstance(multipliers, list) or len(multipliers) != len(documents):
            abort(400, description='Field multipliers must list one factor per recipe')
        multipliers = [_factor(m) for m in multipliers]

    system = _system(data.get('system'))
    recipes = [parse_recipe(d) for d in documents]
    items = generate_shopping_list(recipes, multipliers)

    return jsonify(items=[
        {
            'item': ingredient.item,
            'measurements': [_quantity_json(m, system) for m in ingredient.measurements],
            'display': format_shopping_qty(ingredient, system),
        }
        for ingredient in items
    ])


# ============================================
# CLI COMMANDS
# ============================================

@app.cli.command('convert')
@click.argument('text')
@click.option('--system', type=click.Choice(sorted(VALID_SYSTEMS)), default=None,
              help='Display system (defaults to DEFAULT_SYSTEM).')
@click.option('--times', default='1', help='Exact factor to scale by, e.g. 2 or "1 1/2".')
def convert_command(text, system, times):
    """Parse a measurement and print it in a display system."""
    if len(text) > MAX_LENGTHS['measurement_text']:
        raise click.BadParameter(
            f"longer than {MAX_LENGTHS['measurement_text']} characters", param_hint='TEXT')
    try:
        quantity = scale(parse(text), times)
        click.echo(render(quantity, System(system or app.config['DEFAULT_SYSTEM'])))
    except MeasurementError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}")


@app.cli.command('shopping-list')
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option('--system', type=click.Choice(sorted(VALID_SYSTEMS)), default=None,
              help='Display system (defaults to DEFAULT_SYSTEM).')
@click.option('--multiplier', default='1', help='Exact factor applied to every recipe.')
@click.option('--lenient', is_flag=True, help='Skip ingredients whose measurements do not parse.')
def shopping_list_command(paths, system, multiplier, lenient):
    """Print the merged shopping list for one or more recipe files."""
    system = System(system or app.config['DEFAULT_SYSTEM'])
    try:
        recipes = [load_recipe(path, strict=not lenient) for path in paths]
        items = generate_shopping_list(recipes, [multiplier] * len(recipes))
        for ingredient in items:
            click.echo(f"{sanitize_item_name(ingredient.item)}: {format_shopping_qty(ingredient, system)}")
    except MeasurementError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}")


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
