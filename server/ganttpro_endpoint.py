#!/usr/bin/env python3
"""
HTTP endpoint for work-breakdown imports
Accepts a project name and task list as JSON and creates them in GanttPRO
"""
from flask import Flask, request, jsonify
from flask_cors import CORS

from clients.ganttpro_client import GanttProClient
from config import SERVER_HOST, SERVER_PORT
from errors import ConfigurationError, ProjectCreationError, ValidationError
from importers.ganttpro_importer import import_to_ganttpro
from transformers.request_parser import parse_import_request
from utils import logger

app = Flask(__name__)
CORS(app, origins='*', methods=['POST', 'OPTIONS'], allow_headers=['Content-Type'])


@app.route('/api/ganttpro', methods=['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS'])
def import_project():
    """Create a GanttPRO project from the posted work breakdown"""
    if request.method == 'OPTIONS':
        return '', 200

    if request.method != 'POST':
        return jsonify({"error": "Method not allowed"}), 405

    try:
        client = GanttProClient()
    except ConfigurationError as e:
        logger.error(f"✗ {e.message}")
        return jsonify({"error": e.message}), 500

    try:
        import_request = parse_import_request(request.get_json(silent=True))
    except ValidationError as e:
        return jsonify({"error": e.message}), 400

    try:
        summary = import_to_ganttpro(client, import_request)
    except ProjectCreationError as e:
        status = e.status if e.status and e.status >= 400 else 500
        return jsonify(e.to_dict()), status
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return jsonify({"error": str(e) or "Internal server error"}), 500

    summary.print_summary()
    return jsonify(summary.to_response()), 200


@app.route('/api/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({"status": "ok"}), 200


def run_server(host: str = SERVER_HOST, port: int = SERVER_PORT):
    logger.info(f"Starting GanttPRO import endpoint on http://{host}:{port}/api/ganttpro")
    app.run(host=host, port=port, debug=False, threaded=True)


if __name__ == '__main__':
    run_server()
