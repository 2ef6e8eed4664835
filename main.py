# main.py - JSON API over the scheduling core

from flask import Flask, request, jsonify
import logging
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from config import API_CONFIG, configure_logging, validate_config
from coordinator import SchedulingCoordinator
from mock_data import load_demo_participants
from models import GridRequest, SchedulingContext
from services.best_time_ranker import etiquette_notes
from utils.time_utils import format_offset
from utils.timezone_projector import current_offset_minutes

logger = logging.getLogger(__name__)

app = Flask(__name__)

def _request_data() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


REQUEST_FIELDS = ('participants', 'settings', 'reference_date')


def _coordinator() -> SchedulingCoordinator:
    """Fresh coordinator per request; cached grids never outlive the request"""
    return SchedulingCoordinator()


def _load_context(model=SchedulingContext, fields=REQUEST_FIELDS):
    data = _request_data()
    return model.model_validate({key: data[key] for key in fields if key in data})


def _validation_error(e: ValidationError):
    details = [
        {'loc': [str(part) for part in err['loc']], 'msg': err['msg']}
        for err in e.errors()
    ]
    return jsonify({"error": "Invalid scheduling request", "details": details}), 400


@app.errorhandler(ValidationError)
def handle_validation_error(e):
    return _validation_error(e)


@app.errorhandler(Exception)
def handle_unexpected_error(e):
    if isinstance(e, HTTPException):
        return e
    logger.exception("Error processing request")
    return jsonify({
        "error": str(e),
        "error_context": {
            "error_type": type(e).__name__,
            "processing_stage": "main_api"
        }
    }), 500


@app.route('/best-times', methods=['POST'])
def best_times():
    context = _load_context()
    logger.info("Best times requested for %d participants", len(context.participants))

    suggestions = _coordinator().best_times(context)

    payload = []
    for suggestion in suggestions:
        item = suggestion.model_dump(mode='json')
        item['etiquette'] = etiquette_notes(suggestion, context.participants)
        payload.append(item)

    return jsonify({
        "reference_date": context.reference_date.isoformat(),
        "suggestions": payload
    })


@app.route('/grid', methods=['POST'])
def grid():
    context = _load_context(GridRequest, REQUEST_FIELDS + ('day_offset',))

    slots = _coordinator().slot_grid(context, context.day_offset)

    return jsonify({
        "day": context.day(context.day_offset).isoformat(),
        "slots": [slot.model_dump(mode='json') for slot in slots]
    })


@app.route('/compatibility', methods=['POST'])
def compatibility():
    context = _load_context()
    report = _coordinator().compatibility(context)
    return jsonify(report.model_dump(mode='json'))


@app.route('/demo', methods=['GET'])
def demo():
    participants = load_demo_participants()
    logger.info("Serving %d demo participants", len(participants))
    payload = []
    for p in participants:
        item = p.model_dump(mode='json')
        item['offset'] = format_offset(current_offset_minutes(p.timezone))
        payload.append(item)
    return jsonify({"participants": payload})


@app.route('/health', methods=['GET'])
def health():
    status = _coordinator().health_check()
    return jsonify(status), 200 if status['status'] == 'healthy' else 503


if __name__ == '__main__':
    configure_logging()
    if not validate_config():
        logger.warning("Starting with invalid configuration")
    app.run(host=API_CONFIG['host'], port=API_CONFIG['port'], debug=API_CONFIG['debug'])
