from http.server import BaseHTTPRequestHandler

from top_langs.card import _respond_with_card
from top_langs.config import Settings, configure_logging

SETTINGS = Settings.from_env()
configure_logging(SETTINGS.log_level)


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        _respond_with_card(self, SETTINGS)

    # OPTIONS gets the CORS preflight answer, everything else a 405
    do_OPTIONS = do_POST = do_PUT = do_PATCH = do_DELETE = do_GET
