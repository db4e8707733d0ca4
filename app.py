from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException
from config import get_config

HELLO_BODY = b'Hello World!'
METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']

def on_request(req=None):
    """Fixed response for any request. The request itself is never inspected."""
    return Response(HELLO_BODY, status=200)

def create_app(config_name=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    # Never redirect '//a' or '/a/' to a canonical form
    app.url_map.merge_slashes = False
    app.url_map.strict_slashes = False

    @app.route('/', defaults={'path': ''}, methods=METHODS)
    @app.route('/<path:path>', methods=METHODS)
    def index(path):
        return on_request(request)

    # Unknown methods (405) and anything else rejected before routing
    # get the same answer as a regular request
    @app.errorhandler(HTTPException)
    def any_http_error(e):
        return on_request(request)

    return app

app = create_app()
