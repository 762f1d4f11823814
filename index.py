from http.server import BaseHTTPRequestHandler
from urllib.parse import urlparse


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        # Card requests go straight to the endpoint, everything else to the docs page
        query = urlparse(self.path).query
        location = f"/api/top_languages?{query}" if "username=" in query else "/api/"
        self.send_response(302)
        self.send_header("Location", location)
        self.end_headers()
