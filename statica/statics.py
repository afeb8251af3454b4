DEFAULT_ENCODING = "utf-8"
DEFAULT_INDEX = "index.html"
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_CONTENT_TYPE = "application/octet-stream"

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

# Error pages served from outside the site root, and the built-in one,
# advertise the upper-case charset.
ERROR_PAGE_CONTENT_TYPE = "text/html; charset=UTF-8"

# One hour. Applies to every path missing from ``cache_control``.
DEFAULT_CACHE_CONTROL = "public, max-age=3600"
NO_CACHE = "no-cache"

DEFAULT_ERROR_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Page Not Found</title>
  </head>
  <body>
    <h1>Page Not Found</h1>
    <p>The page you are looking for could not be found.</p>
  </body>
</html>
"""

DEFAULT_ADDRESS = "127.0.0.1"
DEFAULT_PORT = 3474
