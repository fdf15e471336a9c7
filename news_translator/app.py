"""
News Translator Application
===========================
Flask application factory and main entry point.
"""
from flask import Flask
from flask_cors import CORS

from news_translator.config import config
from news_translator.config.constants import APP_VERSION
from news_translator.api.routes import (
    create_translation_blueprint,
    create_summary_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)
from news_translator.api.middleware import add_rate_limit_headers, get_rate_limiter
from news_translator.services.summarizer import NewsSummarizer
from news_translator.services.translator import NewsTranslator
from news_translator.utils.logging import get_logger, debug_print


def create_app(
    testing: bool = False,
    translator: NewsTranslator = None,
    summarizer: NewsSummarizer = None
) -> Flask:
    """
    Application factory for Flask app.

    Args:
        testing: If True, configure for testing
        translator: Translator used by the routes (global instance if not given)
        summarizer: Summarizer used by the routes (global instance if not given)

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    app.config.update(
        SECRET_KEY=config.server.secret_key,
        TESTING=testing
    )
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # CORS configuration
    cors_origins = config.server.cors_origins
    if testing:
        cors_origins = ['*']
        get_rate_limiter().reset()

    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    # Register blueprints
    app.register_blueprint(create_translation_blueprint(translator))
    app.register_blueprint(create_summary_blueprint(summarizer))
    app.register_blueprint(create_health_blueprint(translator))
    app.register_blueprint(create_logs_blueprint())

    # Add middleware
    app.after_request(add_rate_limit_headers)

    # Error handlers
    @app.errorhandler(400)
    def bad_request(e):
        return {'error': 'Bad request', 'details': str(e)}, 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Resource not found'}, 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return {'error': 'Method not allowed'}, 405

    @app.errorhandler(429)
    def rate_limited(e):
        return {'error': 'Rate limit exceeded'}, 429

    @app.errorhandler(500)
    def internal_error(e):
        logger = get_logger().api_logger
        logger.error(f"Internal error: {e}")
        return {'error': 'Internal server error'}, 500

    logger = get_logger()
    logger.api_logger.info(f"News Translator {APP_VERSION} ready on {config.server.host}:{config.server.port}")
    debug_print("Application initialized", 'INFO', 'APP')

    return app


def run_server():
    """Run the Flask development server."""
    app = create_app()

    providers = config.providers
    print(f"""
News Translator v{APP_VERSION}
  Server:  http://{config.server.host}:{config.server.port}
  OpenAI:  {'configured (' + providers.openai_model + ')' if providers.openai_enabled else 'not configured'}
  DeepL:   {'configured' if providers.deepl_enabled else 'not configured'}
  Debug:   {'Enabled' if config.server.debug else 'Disabled'}
    """)

    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=True
    )


if __name__ == '__main__':
    run_server()
