# api/index.py

from http.server import BaseHTTPRequestHandler

HTML = """<!DOCTYPE html>
<html><head>
<meta charset=\"utf-8\"><title>Top Languages Card</title>
<style>
body { font-family: system-ui, sans-serif; background: #0d1117; color: #c9d1d9; max-width: 820px; margin: 40px auto; padding: 20px; }
code { background: #21262d; padding: 2px 6px; border-radius: 4px; }
pre { background: #161b22; padding: 16px; border-radius: 6px; overflow-x: auto; }
h1 { border-bottom: 1px solid #30363d; padding-bottom: 10px; }
.endpoint { margin: 20px 0; padding: 16px; background: #161b22; border-radius: 6px; border-left: 3px solid #58a6ff; }
</style>
</head><body>
<h1>Top Languages Card</h1>
<p>SVG card showing the primary languages of a GitHub user's most recently updated public repos.</p>

<div class=\"endpoint\">
<h3>GET <code>/api/top_languages</code></h3>
<p>Share of repositories per primary language, highest first.</p>
<pre>?username=octocat
&amp;top=5</pre>
<p><code>top</code> must be a positive integer; anything else shows 5 languages.</p>
</div>

<h3>Example</h3>
<pre>&lt;img src=\"https://your-domain.vercel.app/api/top_languages?username=octocat&amp;top=3\" /&gt;</pre>
</body></html>"""

class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        self.send_response(200)
        self.send_header("Content-Type", "text/html; charset=utf-8")
        self.end_headers()
        self.wfile.write(HTML.encode())
