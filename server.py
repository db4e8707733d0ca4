import sys
import socket
import signal
import logging
from werkzeug.serving import make_server, select_address_family
from app import app as default_app
from config import get_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

class BindError(RuntimeError):
    """The listen address could not be acquired."""

    def __init__(self, host, port, reason):
        super().__init__(f"Could not bind http://{host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason

def _bind(host, port):
    if isinstance(port, bool) or not isinstance(port, int) or not 0 <= port <= 65535:
        raise BindError(host, port, 'port must be an integer in 0-65535')
    if not isinstance(host, str) or host.startswith('unix://'):
        raise BindError(host, port, 'host must be a TCP host name or address')
    try:
        family = select_address_family(host, port)
        return socket.create_server((host, port), family=family)
    except (OSError, OverflowError, ValueError) as e:
        raise BindError(host, port, e) from e

def start(host, port, application=None):
    """
    Bind `host`:`port` and return a listening WSGI server for the app.

    Werkzeug exits the process when its own bind fails, so the socket is
    bound here and handed over by file descriptor; a failure surfaces as
    BindError instead. Call serve_forever() on the result to accept requests.
    """
    sock = _bind(host, port)
    try:
        server = make_server(host, port, application or default_app,
                             threaded=True, fd=sock.fileno())
    finally:
        # make_server duplicates the descriptor
        sock.close()
    logger.info("Running on http://%s:%s", host, server.port)
    return server

def _exit_on_signal(signum, frame):
    logger.info("Caught signal, exiting...")
    sys.exit(130)

def main():
    cfg = get_config()
    logging.basicConfig(format=LOG_FORMAT, level=cfg.LOG_LEVEL)
    # serve_forever() swallows KeyboardInterrupt and returns normally
    signal.signal(signal.SIGINT, _exit_on_signal)
    try:
        server = start(cfg.HOST, cfg.PORT)
    except BindError as e:
        logger.error(e)
        sys.exit(1)
    server.serve_forever()

if __name__ == '__main__':
    main()
