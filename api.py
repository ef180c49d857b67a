import os
import threading

from flask import Flask, jsonify, render_template_string, request
from flask_cors import CORS

from config import Settings
from gallery import ALL_FILTER, CatalogState, ProjectCatalog
from gateway import GitHubGateway, RecordSource
from render import GALLERY_TEMPLATE, render_gallery
from tasks import refresh_catalog

settings = Settings.from_env()
catalog = ProjectCatalog()
_load_lock = threading.Lock()

app = Flask(__name__)

# CORS: allow only configured origins (comma-separated). Example local: http://localhost:3000
if settings.allowed_origins:
    CORS(app, resources={r"/*": {"origins": settings.allowed_origins}})
else:
    # If not set, default to no CORS restrictions (safest is to set ALLOWED_ORIGINS in prod)
    CORS(app)


def _build_source() -> RecordSource:
    return GitHubGateway.from_settings(settings)


def _run_refresh() -> bool:
    """One retrieval cycle. Caller must hold _load_lock."""
    try:
        return refresh_catalog(catalog, _build_source(), settings)
    except Exception as e:
        app.logger.error("[api] refresh failed: %s", e)
        return False


def _run_refresh_async() -> bool:
    """Reload in a background thread; requests keep seeing the previous catalog.

    Returns False without starting anything when a refresh is already running.
    """
    if not _load_lock.acquire(blocking=False):
        return False

    def _worker() -> None:
        try:
            _run_refresh()
        finally:
            _load_lock.release()

    thread = threading.Thread(target=_worker)
    thread.daemon = True
    thread.start()
    return True


def _ensure_loaded() -> None:
    if catalog.state is not CatalogState.EMPTY:
        return
    with _load_lock:
        # Another request may have loaded it while we waited
        if catalog.state is CatalogState.EMPTY:
            _run_refresh()


def _current_view() -> dict:
    _ensure_loaded()
    active = (request.args.get("filter") or ALL_FILTER).strip() or ALL_FILTER
    visible, filter_values = catalog.view(active)
    return render_gallery(visible, filter_values, active)


@app.before_request
def _require_api_key():
    """Require API key for mutating routes when API_KEY is set.

    Expect header: Authorization: Bearer <API_KEY>
    """
    api_key = settings.api_key
    if not api_key or request.method in ("GET", "HEAD", "OPTIONS"):
        return None
    auth = request.headers.get("Authorization", "")
    if not auth.startswith("Bearer ") or auth.split(" ", 1)[1].strip() != api_key:
        return jsonify({"ok": False, "error": "unauthorized"}), 401


@app.get("/")
def gallery_page():
    """HTML gallery. Query param `filter` selects a category (default "all")."""
    return render_template_string(GALLERY_TEMPLATE, view=_current_view())


@app.get("/projects")
def projects():
    """Gallery as JSON.

    Query params:
      - filter: category key, or "all" (default)

    Unknown filters yield an empty project list and an empty_message.
    """
    return jsonify(_current_view())


@app.get("/filters")
def filters():
    _ensure_loaded()
    return jsonify({"filters": [ALL_FILTER] + catalog.list_filter_values()})


@app.post("/refresh")
def refresh():
    """Queue a new retrieval cycle; the current catalog stays visible meanwhile.

    `queued` is false when a refresh is already in progress.
    """
    queued = _run_refresh_async()
    app.logger.info("[api] refresh %s", "queued" if queued else "already running")
    return jsonify({"ok": True, "queued": queued})


@app.get("/healthz")
def healthz():
    return jsonify({"ok": True, "catalog": catalog.state.value, "projects": len(catalog.records)})


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    app.run(debug=True, host="0.0.0.0", port=port)
