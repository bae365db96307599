import os

from flask import Flask, current_app, request, send_file
from werkzeug.exceptions import NotFound
from werkzeug.security import safe_join

# --- Configuration ---
PUBLIC_DIR = "./public"  # Every servable file lives under this directory
DEFAULT_DOCUMENT = "/index.html"  # Served when the request path is exactly "/"
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]
# -------------------


def resolve_path(url_path, public_dir=PUBLIC_DIR):
    """Map a request path to a file path under public_dir.

    "/" becomes the default document. Paths that would land outside
    public_dir, or that name a directory with a trailing slash, raise
    NotFound.
    """
    if url_path == "/":
        url_path = DEFAULT_DOCUMENT
    elif url_path.endswith("/"):
        # safe_join normalizes "index.html/" to "index.html"
        raise NotFound()

    resolved = safe_join(public_dir, url_path.lstrip("/"))
    if resolved is None:
        raise NotFound()
    return resolved


def not_found(error=None):
    return "Not Found", 404, {"Content-Type": "text/plain; charset=utf-8"}


def serve_file(path=""):
    # Flask strips the leading slash from <path:path>, so work from request.path
    try:
        resolved = resolve_path(request.path, current_app.config["PUBLIC_DIR"])
        return send_file(os.path.abspath(resolved), conditional=False, etag=False)
    except (NotFound, OSError, ValueError) as e:
        current_app.logger.debug("Could not serve %s: %s", request.path, e)
        return not_found()


def create_app(public_dir=PUBLIC_DIR):
    # No static_folder: the catch-all route below owns every path, /static included
    app = Flask(__name__, static_folder=None)
    app.config["PUBLIC_DIR"] = public_dir

    app.add_url_rule("/", "serve_file", serve_file, methods=METHODS)
    app.add_url_rule("/<path:path>", "serve_file", serve_file, methods=METHODS)
    app.register_error_handler(404, not_found)

    return app


app = create_app()
