import json
import os
import socketserver
import threading
from http.server import BaseHTTPRequestHandler
from http.server import ThreadingHTTPServer

import requests

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')


def load_fixture(name):
    with open(os.path.join(FIXTURES_DIR, name), 'rb') as fixture:
        return fixture.read()


class NullServer(socketserver.TCPServer):

    request_queue_size = 1

    def __init__(self, server_address, *args, **kwargs):
        # simply init'ing is sufficient to open the port, which
        # with the server not started creates a black hole server
        socketserver.TCPServer.__init__(
            self, server_address, socketserver.BaseRequestHandler,
            *args, **kwargs)


class FixtureServer(ThreadingHTTPServer):
    '''Serves canned responses, keyed by request path, on a local port.

    ``routes`` maps a path to ``(status, body)``; unknown paths get a 404.
    Received requests are recorded as ``(path, headers)`` in ``requests``.
    '''

    daemon_threads = True

    def __init__(self, routes):
        self.routes = routes
        self.requests = []
        ThreadingHTTPServer.__init__(self, ('127.0.0.1', 0),
                                     _FixtureHandler)
        self._thread = threading.Thread(target=self.serve_forever)
        self._thread.daemon = True

    @property
    def base_url(self):
        return 'http://%s:%s/' % self.server_address

    def start(self):
        self._thread.start()
        return self

    def stop(self):
        self.shutdown()
        self.server_close()
        self._thread.join()


class _FixtureHandler(BaseHTTPRequestHandler):

    def do_GET(self):
        self.server.requests.append((self.path, dict(self.headers)))
        status, body = self.server.routes.get(self.path, (404, b''))
        self.send_response(status)
        self.send_header('X-Jenkins', '2.160')
        self.send_header('Content-Type', 'application/json;charset=utf-8')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format, *args):
        pass


def build_response_mock(status_code, json_body=None, headers=None,
                        text=None, **kwargs):
    response = requests.Response()
    response.status_code = status_code

    if json_body is not None:
        text = json.dumps(json_body)
    if text is not None:
        response._content = text.encode('utf-8')
        response.headers['content-length'] = str(len(response._content))
    else:
        response._content = b''

    if headers is not None:
        for k, v in headers.items():
            response.headers[k] = v

    for k, v in kwargs.items():
        setattr(response, k, v)

    return response
