"""Flask front end: load a bibliography from an upload or a URL and render it."""
import logging

from flask import Flask, Response, flash, get_flashed_messages, jsonify, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .config import Config
from .exporters import EXPORT_FORMATS, export_publications
from .fetcher import is_valid_url
from .renderer import render_embed, render_page
from .sources import load_publications, parse_content
from .state import GROUPINGS, LibraryState
from .utils.error_handling import BibshelfError

logger = logging.getLogger(__name__)

config = Config()

app = Flask(__name__)

# Configuration
app.config.update(
    SECRET_KEY=config.FLASK_SECRET,
    RATELIMIT_DEFAULT=config.RATELIMIT_DEFAULT,
    RATELIMIT_HEADERS_ENABLED=True,
    MAX_CONTENT_LENGTH=16 * 1024 * 1024,
)

# Initialize rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    app=app,
    default_limits=[config.RATELIMIT_DEFAULT]
)

@app.errorhandler(429)
def ratelimit_handler(e):
    return jsonify({"error": "Rate limit exceeded. Please try again later."}), 429


# Helpers
def _grouping_arg(values) -> str:
    grouping = values.get("group", config.DEFAULT_GROUPING)
    return grouping if grouping in GROUPINGS else Config.GROUP_BY_YEAR


def _load_from_url(url: str):
    """Returns (state, error_message); exactly one of them is None."""
    if not is_valid_url(url):
        return None, "Please enter a valid URL"
    try:
        publications, source_format = load_publications(url, config)
    except BibshelfError as e:
        logger.error(f"Failed to load {url}: {e}")
        return None, f"Failed to load file: {e}"
    if not publications:
        return None, f"No publications found in the {source_format.upper()} file"
    return LibraryState(publications=publications, source_format=source_format), None


def _load_from_upload(upload):
    if not upload.filename.lower().endswith((".bib", ".bibtex", ".csv", ".json")):
        return None, "Please upload a valid .bib or .csv file"
    content = upload.read().decode("utf-8", errors="replace")
    publications, source_format = parse_content(content, upload.filename)
    if not publications:
        return None, f"No publications found in the {source_format.upper()} file"
    return LibraryState(publications=publications, source_format=source_format), None


@app.route("/", methods=["GET", "POST"])
@limiter.limit("10 per minute")
def index():
    values = request.values
    source_url = (values.get("bib") or "").strip()
    upload = request.files.get("file")

    state, error = LibraryState(), None
    if upload and upload.filename:
        state, error = _load_from_upload(upload)
    elif source_url:
        state, error = _load_from_url(source_url)

    if error:
        flash(error, "error")
        state = LibraryState()

    state = state.with_grouping(_grouping_arg(values)).with_query(values.get("q", ""))
    return render_page(
        state,
        messages=get_flashed_messages(),
        show_form=True,
        source_url=source_url,
    )


@app.route("/embed", methods=["GET"])
@limiter.limit("30 per minute")
def embed():
    source_url = (request.args.get("bib") or "").strip()
    if not source_url:
        body = render_embed(error="No bib URL provided. Usage: /embed?bib=URL")
        status = 400
    else:
        state, error = _load_from_url(source_url)
        if error:
            body, status = render_embed(error=error), 200
        else:
            state = state.with_grouping(_grouping_arg(request.args)).with_query(request.args.get("q", ""))
            body, status = render_embed(state), 200

    response = Response(body, status=status, mimetype="text/html")
    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


@app.route("/export/<fmt>", methods=["GET"])
@limiter.limit("5 per minute")
def export(fmt):
    if fmt not in EXPORT_FORMATS:
        return jsonify({"error": f"Unknown export format: {fmt}"}), 404

    state, error = _load_from_url((request.args.get("bib") or "").strip())
    if error:
        return jsonify({"error": error}), 400

    extension, mimetype = EXPORT_FORMATS[fmt]
    content = export_publications(state.with_query(request.args.get("q", "")).visible(), fmt)
    return Response(
        content,
        mimetype=mimetype,
        headers={"Content-disposition": f"attachment; filename={config.EXPORT_BASENAME}.{extension}"}
    )


# Simple health route
@app.route("/health", methods=["GET"])
def health():
    return "ok", 200


if __name__ == "__main__":
    # In production, use a production WSGI server like Gunicorn
    app.run(debug=True)
