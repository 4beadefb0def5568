"""
Engineering Calculator API - Flask Backend
Main application entry point
"""

from datetime import datetime, timezone
import logging
import os

from flask import Flask, current_app, jsonify
from flask_cors import CORS

VERSION = '1.0.0'


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _formula_endpoints():
    """Map of formula path -> usage template, from the registered view functions."""
    endpoints = {}
    for rule in current_app.url_map.iter_rules():
        view = current_app.view_functions.get(rule.endpoint)
        formula = getattr(view, 'formula', None)
        if formula is not None:
            endpoints[formula.name] = f"{rule.rule}?{formula.usage}"
    return endpoints


def create_app(config=None):
    """Create and configure the Flask application"""
    app = Flask(__name__)

    app.config.from_mapping(
        PORT=int(os.environ.get('PORT', 5000)),
        DEBUG=_env_flag('FLASK_DEBUG'),
        CORS_ORIGINS=os.environ.get('CORS_ORIGINS', '*'),
        LOG_LEVEL=os.environ.get('LOG_LEVEL', 'INFO').upper(),
    )
    if config:
        app.config.update(config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Keep result fields in the order they are built; Ω and ° stay readable
    app.json.sort_keys = False
    app.json.ensure_ascii = False

    origins = app.config['CORS_ORIGINS']
    if isinstance(origins, str):
        origins = [o.strip() for o in origins.split(',') if o.strip()] or '*'

    CORS(app, resources={
        r"/api/*": {
            "origins": origins,
            "methods": ["GET", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization", "X-Requested-With",
                              "Accept", "Origin"],
            "supports_credentials": True,
        }
    })

    # Register API blueprints
    from api.slope import slope_bp
    from api.electrical import electrical_bp
    from api.algebra import algebra_bp

    app.register_blueprint(slope_bp, url_prefix='/api')
    app.register_blueprint(electrical_bp, url_prefix='/api')
    app.register_blueprint(algebra_bp, url_prefix='/api')

    @app.route('/')
    def index():
        endpoints = {
            'test': '/api/test',
            'health': '/api/health',
        }
        endpoints.update(_formula_endpoints())
        return jsonify({
            "message": "Engineering Calculator API",
            "version": VERSION,
            "endpoints": endpoints,
        })

    # Health check endpoint
    @app.route('/api/health')
    def health():
        return jsonify({
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "message": "Engineering Calculator API is running",
        })

    @app.route('/api/test')
    def cors_test():
        return jsonify({"message": "CORS works! Backend is running successfully."})

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        available = ['/api/test', '/api/health']
        available += [f"/api/{name}" for name in _formula_endpoints()]
        return jsonify({
            "status": "error",
            "message": "Endpoint not found",
            "availableEndpoints": available,
        }), 404

    @app.errorhandler(500)
    def internal_error(error):
        original = getattr(error, 'original_exception', None) or error
        app.logger.error("Unhandled error: %s", original)
        return jsonify({
            "status": "error",
            "message": "Internal Server Error",
            "error": str(original) if app.debug else "Something went wrong",
        }), 500

    return app


if __name__ == '__main__':
    logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO').upper())
    app = create_app()
    port = app.config['PORT']
    app.logger.info("Engineering Calculator Backend running on http://localhost:%s", port)
    app.run(host='0.0.0.0', port=port, debug=app.config['DEBUG'])
