"""API routes for methodologies and calculation."""
from collections.abc import Mapping

from flask import Blueprint, current_app, jsonify, request

from zakatcore.methodology import UnknownMethodologyError
from zakatcore.methodology.loader import validate_methodology
from zakatcore.services.calc import calculate_zakat
from zakatcore.services.config import get_engine_config
from zakatcore.services.difference import compare_methodologies
from zakatcore.services.snapshot import FinancialSnapshot, check_snapshot

api_bp = Blueprint('api', __name__)


def _registry():
    return current_app.extensions['methodology_registry']


def _summary(key, policy) -> dict:
    meta = policy.meta
    return {
        'id': key,
        'name': meta.name,
        'version': meta.version,
        'author': meta.author,
        'description': meta.description,
        'tier': meta.tier,
    }


@api_bp.errorhandler(UnknownMethodologyError)
def unknown_methodology(e):
    return jsonify({'error': str(e)}), 404


@api_bp.route('/methodologies')
def methodologies():
    """List registered methodologies."""
    registry = _registry()
    return jsonify({
        'default': registry.default_id,
        'methodologies': [_summary(key, policy) for key, policy in registry.items()],
    })


@api_bp.route('/methodologies/<methodology_id>')
def methodology_detail(methodology_id):
    """Return the full methodology document."""
    return jsonify(_registry().get(methodology_id).to_dict())


@api_bp.route('/methodologies/validate', methods=['POST'])
def methodology_validate():
    """Validate a candidate methodology document.

    The document is never registered; the response reports whether it would
    be accepted and which errors caused a fallback.
    """
    candidate = request.get_json(silent=True)
    result = validate_methodology(candidate, fallback=_registry().default)
    return jsonify({
        'valid': result.is_valid,
        'errors': result.errors,
        'used_fallback': result.used_fallback,
        'methodology_id': result.policy.id,
    })


@api_bp.route('/methodologies/compare')
def methodology_compare():
    """Compare two registered methodologies: ?a=hanafi&b=shafii"""
    a = request.args.get('a')
    b = request.args.get('b')
    if not a or not b:
        return jsonify({'error': 'Query parameters a and b are required'}), 400

    registry = _registry()
    differences = compare_methodologies(registry.get(a), registry.get(b))
    return jsonify({
        'a': a,
        'b': b,
        'differences': [row.to_dict() for row in differences],
    })


@api_bp.route('/calculate', methods=['POST'])
def calculate():
    """Calculate zakat for a financial snapshot.

    Request format:
    {
        "snapshot": {"checking_accounts": 20000, "credit_card_balance": 5000, ...},
        "silver_price": 24.50,
        "gold_price": 2650.00,
        "methodology": "hanafi",        # optional registry id
        "config": {...}                 # optional inline methodology document
    }

    Prices default to the configured fallback spot prices. An inline
    ``config`` that fails validation is replaced by the default methodology
    and the errors are returned as ``methodology_warnings``.
    """
    body = request.get_json(silent=True)
    if not isinstance(body, Mapping):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    raw_snapshot = body.get('snapshot', {})
    if not isinstance(raw_snapshot, Mapping):
        return jsonify({'error': 'snapshot must be an object'}), 400
    errors = check_snapshot(raw_snapshot)
    if errors:
        return jsonify({'error': 'Invalid snapshot', 'details': errors}), 400

    prices = {}
    for key, default in (('silver_price', current_app.config['DEFAULT_SILVER_PRICE_PER_OUNCE']),
                         ('gold_price', current_app.config['DEFAULT_GOLD_PRICE_PER_OUNCE'])):
        value = body.get(key, default)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            return jsonify({'error': f'{key} must be a positive number'}), 400
        prices[key] = value

    snapshot = FinancialSnapshot.from_dict(raw_snapshot)
    registry = _registry()
    warnings = []

    if body.get('config') is not None:
        result = validate_methodology(body['config'], fallback=registry.default)
        policy = result.policy
        warnings = result.errors
        if result.used_fallback:
            current_app.logger.warning(f"Inline methodology rejected: {warnings}")
    else:
        requested = body.get('methodology')
        if requested is not None and not isinstance(requested, str):
            return jsonify({'error': 'methodology must be a string'}), 400
        methodology_id = requested or snapshot.methodology or registry.default_id
        policy = registry.get(methodology_id)

    result = calculate_zakat(snapshot, prices['silver_price'], prices['gold_price'], policy)
    response = result.to_dict()
    response['methodology_warnings'] = warnings
    return jsonify(response)


@api_bp.route('/config')
def config():
    """Return engine configuration."""
    cfg = get_engine_config()
    cfg['default_methodology'] = _registry().default_id
    cfg['methodologies'] = _registry().ids()
    return jsonify(cfg)
