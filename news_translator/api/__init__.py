"""
API Module
==========
Flask API routes and blueprints.
"""
from news_translator.api.routes import (
    create_translation_blueprint,
    create_summary_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)

__all__ = [
    'create_translation_blueprint',
    'create_summary_blueprint',
    'create_health_blueprint',
    'create_logs_blueprint'
]
