"""
Web Interface for the Email Builder
JSON endpoints agents and the builder front-end use to parse, validate,
edit and export email templates.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.agent_api import AgentAPI
from core.component_mapper import parse_jsx
from core.config import BuilderSettings
from core.errors import ComponentNotFoundError, InvalidJSXError
from core.models import EmailComponent
from core.serializer import to_jsx
from core.starter_templates import get_template, list_templates
from core.streaming_parser import simulate_agent_stream
from core.validation import lint_components, validate_jsx
from exporters.export_builder import EXPORT_FORMATS, ExportBuilder

logger = logging.getLogger(__name__)


def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')
    return data


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string")
    return value


def _components_from(data: Dict[str, Any]) -> List[EmailComponent]:
    """Components given either as 'jsx' text or as a 'components' list."""
    if 'jsx' in data:
        return parse_jsx(_require_str(data, 'jsx'))
    raw = data.get('components')
    if not isinstance(raw, list):
        raise ValueError("Provide either 'jsx' or a 'components' list")
    if not all(isinstance(item, dict) for item in raw):
        raise ValueError('Each component must be a JSON object')
    return [EmailComponent.from_dict(item) for item in raw]


def _dump(components: List[EmailComponent]) -> List[Dict[str, Any]]:
    return [c.to_dict() for c in components]


def create_app(settings: Optional[BuilderSettings] = None) -> Flask:
    settings = settings or BuilderSettings.load()
    app = Flask(__name__)
    app.config['BUILDER_SETTINGS'] = settings
    exporter = ExportBuilder()

    @app.errorhandler(InvalidJSXError)
    def invalid_jsx(e):
        return jsonify({'error': str(e), 'errors': e.errors}), 400

    @app.errorhandler(ComponentNotFoundError)
    def not_found(e):
        return jsonify({'error': str(e)}), 404

    @app.errorhandler(ValueError)
    def bad_request(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(Exception)
    def server_error(e):
        if isinstance(e, HTTPException):
            return e
        logger.error(f"Unhandled error on {request.path}: {str(e)}", exc_info=True)
        return jsonify({'error': str(e)}), 500

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/api/templates')
    def templates():
        return jsonify({'templates': [t.to_dict() for t in list_templates()]})

    @app.route('/api/templates/<key>')
    def template_detail(key):
        try:
            template = get_template(key)
        except KeyError:
            return jsonify({'error': f'Unknown template: {key}'}), 404
        payload = template.to_dict()
        payload['components'] = _dump(parse_jsx(template.jsx))
        return jsonify(payload)

    @app.route('/api/parse', methods=['POST'])
    def parse():
        data = _body()
        jsx = _require_str(data, 'jsx')
        if data.get('strict'):
            return jsonify({'components': _dump(AgentAPI().from_jsx(jsx))})
        return jsonify({'components': _dump(parse_jsx(jsx))})

    @app.route('/api/validate', methods=['POST'])
    def validate():
        return jsonify(validate_jsx(_require_str(_body(), 'jsx')).to_dict())

    @app.route('/api/serialize', methods=['POST'])
    def serialize():
        return jsonify({'jsx': to_jsx(_components_from(_body()))})

    @app.route('/api/lint', methods=['POST'])
    def lint():
        components = _components_from(_body())
        issues = lint_components(components, settings.max_text_length)
        return jsonify({'issues': [i.to_dict() for i in issues]})

    @app.route('/api/export', methods=['POST'])
    def export():
        data = _body()
        export_format = data.get('format', 'html')
        if export_format not in EXPORT_FORMATS:
            raise ValueError(f"Unknown export format: {export_format}")
        components = _components_from(data)
        return jsonify({'format': export_format, 'content': exporter.export(components, export_format)})

    @app.route('/api/replace', methods=['POST'])
    def replace():
        data = _body()
        api = AgentAPI(_components_from({'components': data.get('components')}))
        updated = api.from_jsx(
            _require_str(data, 'jsx'),
            node_id=_require_str(data, 'node_id'),
            strict=bool(data.get('strict', True)),
        )
        return jsonify({'components': _dump(updated)})

    @app.route('/api/stream', methods=['POST'])
    def stream():
        data = _body()
        chunk_size = int(data.get('chunk_size', settings.stream_chunk_size))
        updates = []

        def on_chunk(chunk, components):
            updates.append({'chunk': chunk, 'componentCount': len(components)})

        final = simulate_agent_stream(_require_str(data, 'jsx'), on_chunk, chunk_size=chunk_size, delay_ms=0)
        return jsonify({'updates': updates, 'components': _dump(final)})

    return app


if __name__ == '__main__':
    settings = BuilderSettings.load()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    create_app(settings).run(host=settings.host, port=settings.port)
