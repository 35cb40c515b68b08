import os
import re
import logging
import hashlib
import sys
from functools import wraps
from typing import Dict, List, Optional

from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_caching import Cache
from dotenv import load_dotenv

# WSGIMiddleware lets Uvicorn (ASGI) serve the Flask (WSGI) app
from uvicorn.middleware.wsgi import WSGIMiddleware

from pydantic import BaseModel, Field, ValidationError

from name_analysis import analyze_name, compare_names, to_json_ready
from numerology import NumerologySystem, describe_number
from phonology import Difficulty
from suggestions import NameSuggestionEngine

# Load environment variables
load_dotenv()


def _env_flag(key: str, default: str = "true") -> bool:
    return os.getenv(key, default).strip().lower() in ("1", "true", "yes", "on")


MAX_NAME_LENGTH = int(os.getenv('MAX_NAME_LENGTH', 100))
LOG_FILE = os.getenv('LOG_FILE', '')

# Configure logging
_log_handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
if LOG_FILE:
    _log_handlers.append(logging.FileHandler(LOG_FILE))

logging.basicConfig(
    level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=_log_handlers
)
logger = logging.getLogger(__name__)

# Initialize Flask app
app = Flask(__name__)
logger.info("Flask app instance created.")
app.config['SECRET_KEY'] = os.getenv('SECRET_KEY', 'name-analysis-secret-key')
app.config['CACHE_TYPE'] = os.getenv('CACHE_TYPE', 'SimpleCache')
app.config['CACHE_DEFAULT_TIMEOUT'] = int(os.getenv('CACHE_DEFAULT_TIMEOUT', 300))

# Initialize extensions (cache and limiter)
cache = None
try:
    cache = Cache(app)
    logger.info("Flask-Caching initialized successfully.")
except Exception as e:
    logger.warning(f"Could not initialize cache, analysis results will not be cached: {e}")

limiter = Limiter(
    get_remote_address,
    app=app,
    default_limits=["200 per day", "50 per hour"],
    storage_uri=os.getenv('REDIS_URL', 'memory://'),
    enabled=_env_flag('RATELIMIT_ENABLED'),
)
logger.info("Flask-Limiter initialized.")

# CORS Configuration
CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)

logger.info("CORS configured for the Flask app.")


# --- Decorators ---
def cached_operation(timeout=3600):
    """Caches a pure function's result under an md5 of its name and arguments."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if cache is None:
                logger.warning(f"Cache not initialized, skipping caching for {func.__name__}.")
                return func(*args, **kwargs)

            key_parts = [func.__name__] + [repr(arg) for arg in args]
            for k, v in sorted(kwargs.items()):
                key_parts.append(f"{k}={v!r}")
            cache_key = hashlib.md5("_".join(key_parts).encode()).hexdigest()

            cached_result = cache.get(cache_key)
            if cached_result is not None:
                logger.info(f"Cache hit for {func.__name__}")
                return cached_result

            result = func(*args, **kwargs)
            cache.set(cache_key, result, timeout=timeout)
            logger.info(f"Cache miss for {func.__name__}, result cached.")
            return result
        return wrapper
    return decorator


# --- Security Manager ---
class SecurityManager:
    @staticmethod
    def validate_input_security(input_string: str) -> bool:
        """
        Rejects input carrying markup or SQL keywords.
        Names are only ever analyzed, never stored, but they are echoed back.
        """
        if re.search(r'<(script|iframe|img|link|style).*?>', input_string, re.IGNORECASE) or \
           re.search(r'(SELECT|INSERT|UPDATE|DELETE|DROP)\s+', input_string, re.IGNORECASE):
            return False
        return True


# --- Pydantic Schemas for Request Parsing ---
class AnalyzeRequest(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH, description="The name to analyze.")
    date_of_birth: Optional[str] = Field(default=None, max_length=20, description="Optional birth date for the Life Path number.")


class CompatibilityRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    second_name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)


class SuggestionsRequest(BaseModel):
    target_number: Optional[int] = Field(default=None, ge=1, le=33)
    difficulty: Optional[Difficulty] = None
    gender: Optional[str] = None
    query: Optional[str] = Field(default=None, max_length=MAX_NAME_LENGTH)
    min_length: int = Field(default=2, ge=1)
    max_length: int = Field(default=12, ge=1)
    limit: int = Field(default=24, ge=1, le=50)
    candidates: Optional[List[str]] = Field(default=None, max_length=500)


def _request_payload() -> Dict:
    """JSON body for POST, query string otherwise."""
    if request.method == 'POST':
        return request.get_json(silent=True) or {}
    return request.args.to_dict()


def _validation_error_response(error: ValidationError):
    details = [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" if err['loc'] else err['msg']
        for err in error.errors()
    ]
    logger.error(f"Request validation failed: {details}")
    return jsonify({"error": "Invalid request.", "details": details}), 400


def _insecure_input_response(field: str):
    logger.error(f"Rejected insecure input in '{field}'.")
    return jsonify({"error": f"Invalid characters in '{field}'."}), 400


@cached_operation(timeout=3600)
def get_name_analysis(name: str, date_of_birth: Optional[str] = None) -> Dict:
    """JSON-ready analysis for a name; safe to cache since the engine is pure."""
    return analyze_name(name, date_of_birth).to_dict()


# --- Flask Routes ---
@app.route('/')
def home():
    """Basic home route for health check."""
    return "Name analysis engine is running."


@app.route('/analyze', methods=['GET', 'POST'])
@limiter.limit("30 per minute")
def analyze_endpoint():
    """Numerology and phonology analysis of a single name."""
    try:
        payload = AnalyzeRequest.model_validate(_request_payload())
    except ValidationError as e:
        return _validation_error_response(e)

    if not SecurityManager.validate_input_security(payload.name):
        return _insecure_input_response('name')

    try:
        analysis = get_name_analysis(payload.name, payload.date_of_birth)
    except Exception as e:
        logger.error(f"Error analyzing name: {e}", exc_info=True)
        return jsonify({"error": "An internal server error occurred during name analysis. Please try again later."}), 500

    if not analysis["has_letters"]:
        return jsonify({"error": "Please enter a name containing at least one letter."}), 400

    return jsonify(analysis), 200


@app.route('/compatibility', methods=['POST'])
@limiter.limit("30 per minute")
def compatibility_endpoint():
    """Compares two names across both numerology systems."""
    try:
        payload = CompatibilityRequest.model_validate(_request_payload())
    except ValidationError as e:
        return _validation_error_response(e)

    for field in ('first_name', 'second_name'):
        if not SecurityManager.validate_input_security(getattr(payload, field)):
            return _insecure_input_response(field)

    try:
        result = compare_names(payload.first_name, payload.second_name)
    except Exception as e:
        logger.error(f"Error comparing names: {e}", exc_info=True)
        return jsonify({"error": "An internal server error occurred while comparing names. Please try again later."}), 500

    return jsonify(result), 200


@app.route('/meaning/<system>/<int:number>', methods=['GET'])
def meaning_endpoint(system: str, number: int):
    """Meaning and traits of a number in the given system."""
    try:
        numerology_system = NumerologySystem(system.lower())
    except ValueError:
        return jsonify({"error": f"Unknown numerology system '{system}'. Use 'chaldean' or 'pythagorean'."}), 400

    return jsonify(describe_number(number, numerology_system)), 200


@app.route('/suggestions', methods=['GET', 'POST'])
@limiter.limit("20 per minute")
def suggestions_endpoint():
    """Ranks candidate names (or the bundled corpus) against the given filters."""
    try:
        payload = SuggestionsRequest.model_validate(_request_payload())
    except ValidationError as e:
        return _validation_error_response(e)

    if payload.min_length > payload.max_length:
        return jsonify({"error": "min_length cannot be greater than max_length."}), 400

    try:
        suggestions = NameSuggestionEngine.rank(
            candidates=payload.candidates,
            target_number=payload.target_number,
            difficulty=payload.difficulty,
            min_length=payload.min_length,
            max_length=payload.max_length,
            query=payload.query,
            gender=payload.gender,
            limit=payload.limit,
        )
    except Exception as e:
        logger.error(f"Error generating suggestions: {e}", exc_info=True)
        return jsonify({"error": "An internal server error occurred while generating suggestions. Please try again later."}), 500

    return jsonify({"suggestions": to_json_ready(suggestions)}), 200


# Error handlers
@app.errorhandler(400)
def bad_request(error):
    logger.error(f"Bad Request: {error}")
    return jsonify({"error": "Bad Request: " + str(error.description)}), 400


@app.errorhandler(404)
def not_found(error):
    logger.error(f"Not Found: {error}")
    return jsonify({"error": "Not Found: The requested URL was not found on the server."}), 404


@app.errorhandler(405)
def method_not_allowed(error):
    logger.error(f"Method Not Allowed: {error}")
    return jsonify({"error": "Method not allowed."}), 405


@app.errorhandler(429)
def rate_limited(error):
    logger.warning(f"Rate limit exceeded: {error}")
    return jsonify({"error": "Too many requests. Please slow down and try again shortly."}), 429


@app.errorhandler(500)
def internal_server_error(error):
    logger.error(f"Internal Server Error: {error}", exc_info=True)
    return jsonify({"error": "Internal Server Error: The server encountered an internal error and was unable to complete your request. Please try again later."}), 500


# The ASGI application Uvicorn serves, wrapping the Flask app.
asgi_app = WSGIMiddleware(app)

if __name__ == '__main__':
    # uvicorn app:asgi_app --host 0.0.0.0 --port 8000
    app.run(debug=_env_flag('FLASK_DEBUG', 'false'), host='0.0.0.0', port=int(os.getenv('PORT', 5000)))
