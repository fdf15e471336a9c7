"""
API Routes
==========
Flask blueprints for all API endpoints.
"""
import json
import time
from flask import Blueprint, request, jsonify, Response

from news_translator.config import config
from news_translator.config.constants import APP_VERSION, SUPPORTED_LANGUAGES
from news_translator.api.middleware import rate_limit, require_api_key
from news_translator.models.schemas import (
    TranslateRequest,
    BatchTranslateRequest,
    SummarizeRequest,
    TranslationResponse,
    HealthStatus
)
from news_translator.services.base import TranslationExhaustedError
from news_translator.services.summarizer import NewsSummarizer, get_summarizer
from news_translator.services.translator import NewsTranslator, get_translator
from news_translator.utils.logging import get_logger, debug_print


def create_translation_blueprint(translator: NewsTranslator = None) -> Blueprint:
    """Create translation routes blueprint."""
    bp = Blueprint('translations', __name__, url_prefix='/api')
    logger = get_logger().api_logger

    def current_translator() -> NewsTranslator:
        return translator or get_translator()

    @bp.route('/translate', methods=['POST'])
    @rate_limit
    @require_api_key
    def translate():
        """Translate one text into Turkish."""
        payload = TranslateRequest.from_json(request.get_json(silent=True))
        errors = payload.validate()
        if errors:
            return jsonify({'error': errors[0]}), 400

        debug_print(f"[API] Translate request: {len(payload.text)} chars", 'INFO', 'API')
        try:
            translation = current_translator().translate_for_endpoint(payload.text)
        except TranslationExhaustedError as e:
            logger.error(f"Translation failed: {e}")
            return jsonify(TranslationResponse(e.best_effort, 'Translation failed').to_dict()), 500

        return jsonify(TranslationResponse(translation).to_dict())

    @bp.route('/translate/batch', methods=['POST'])
    @rate_limit
    @require_api_key
    def translate_batch():
        """Translate a list of texts, keeping their order."""
        payload = BatchTranslateRequest.from_json(request.get_json(silent=True))
        errors = payload.validate(config.translation.max_batch_items)
        if errors:
            return jsonify({'error': '; '.join(errors)}), 400

        debug_print(f"[API] Batch request: {len(payload.texts)} texts", 'INFO', 'API')
        translations = current_translator().translate_batch(payload.texts, payload.target_lang)
        return jsonify({'translations': translations})

    @bp.route('/languages', methods=['GET'])
    def get_languages():
        """Get supported languages."""
        return jsonify({'languages': SUPPORTED_LANGUAGES})

    return bp


def create_summary_blueprint(summarizer: NewsSummarizer = None) -> Blueprint:
    """Create summarization routes blueprint."""
    bp = Blueprint('summaries', __name__, url_prefix='/api')

    @bp.route('/summarize', methods=['POST'])
    @rate_limit
    @require_api_key
    def summarize():
        """Summarize a news item with sentiment."""
        payload = SummarizeRequest.from_json(request.get_json(silent=True))
        errors = payload.validate()
        if errors:
            return jsonify({'error': '; '.join(errors)}), 400

        result = (summarizer or get_summarizer()).summarize(payload.title, payload.text, payload.language)
        return jsonify(result.to_dict())

    return bp


def create_health_blueprint(translator: NewsTranslator = None) -> Blueprint:
    """Create health check routes blueprint."""
    bp = Blueprint('health', __name__, url_prefix='/api')

    @bp.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        providers = (translator or get_translator()).provider_status()
        status = HealthStatus(
            status='healthy' if any(providers.values()) else 'degraded',
            version=APP_VERSION,
            providers=providers
        )
        return jsonify(status.to_dict())

    return bp


def create_logs_blueprint() -> Blueprint:
    """Create logs routes blueprint for operators."""
    from news_translator.utils.logging import log_buffer

    bp = Blueprint('logs', __name__)

    @bp.route('/logs', methods=['GET'])
    def get_logs():
        """Get logs from the in-memory buffer, optionally since an id and at or above a level."""
        since_id = request.args.get('since', 0, type=int)
        try:
            logs = log_buffer.get_since(since_id, request.args.get('level'))
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        return jsonify({'logs': logs})

    @bp.route('/logs/stream')
    def stream_logs():
        """Stream logs in real-time using Server-Sent Events."""
        def generate():
            last_id = 0
            while True:
                for entry in log_buffer.get_since(last_id):
                    last_id = entry['id']
                    yield f"data: {json.dumps(entry)}\n\n"
                time.sleep(0.5)

        return Response(
            generate(),
            mimetype='text/event-stream',
            headers={
                'Cache-Control': 'no-cache',
                'Connection': 'keep-alive'
            }
        )

    @bp.route('/logs/clear', methods=['POST'])
    def clear_logs():
        """Clear the log buffer."""
        log_buffer.clear()
        return jsonify({'message': 'Logs cleared'})

    return bp
