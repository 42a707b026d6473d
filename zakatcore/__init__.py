"""Flask application factory for the zakat methodology engine."""
import logging
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


logger = logging.getLogger('zakatcore')


def create_app(config: dict | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    from zakatcore.services.config import (
        get_community_methodology_dir,
        get_default_gold_price,
        get_default_methodology_id,
        get_default_silver_price,
        get_log_level,
    )

    app = Flask(__name__)

    # Trust X-Forwarded-For from reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Default configuration
    app.config.update(
        LOG_LEVEL=get_log_level(),
        DEFAULT_METHODOLOGY=get_default_methodology_id(),
        COMMUNITY_METHODOLOGY_DIR=get_community_methodology_dir(),
        DEFAULT_SILVER_PRICE_PER_OUNCE=get_default_silver_price(),
        DEFAULT_GOLD_PRICE_PER_OUNCE=get_default_gold_price(),
    )

    # Override with provided config
    if config:
        app.config.update(config)

    # Keep breakdown categories in report order
    app.json.sort_keys = False
    logger.setLevel(app.config['LOG_LEVEL'])

    # Build the methodology registry once; it is read-only afterwards
    from zakatcore.methodology.registry import init_registry
    app.extensions['methodology_registry'] = init_registry(
        community_dir=app.config['COMMUNITY_METHODOLOGY_DIR'],
        default_id=app.config['DEFAULT_METHODOLOGY'],
    )

    # Register CLI commands
    from zakatcore import cli
    cli.register_cli(app)

    # Register blueprints
    from zakatcore.routes.health import health_bp
    from zakatcore.routes.api import api_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    return app
