"""Cross-origin headers for the browser frontends."""

from flask import Flask, request, current_app

ALLOW_METHODS = 'GET, POST, PUT, DELETE, PATCH, OPTIONS'
ALLOW_HEADERS = 'Origin, X-Requested-With, Content-Type, Accept, Authorization'


def answer_preflight():
    """Short-circuit OPTIONS requests before routing."""
    if request.method == 'OPTIONS':
        return current_app.response_class(status=200)
    return None


def add_cors_headers(response):
    """Echo an allowed Origin and set the fixed CORS headers."""
    origin = request.headers.get('Origin')
    if origin in current_app.config['CORS_ALLOWED_ORIGINS']:
        response.headers['Access-Control-Allow-Origin'] = origin
    response.headers['Access-Control-Allow-Credentials'] = 'true'
    response.headers['Access-Control-Allow-Methods'] = ALLOW_METHODS
    response.headers['Access-Control-Allow-Headers'] = ALLOW_HEADERS
    return response


def init_cors(app: Flask):
    """Register the CORS hooks on every request of `app`."""
    app.before_request(answer_preflight)
    app.after_request(add_cors_headers)
