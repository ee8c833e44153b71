import math

from flask import Flask, Response, abort, current_app, g, jsonify, render_template_string, request
import structlog

from . import config
from .render import render_markers
from .store import LocationConflict, LocationNotFound, LocationStore

logger = structlog.get_logger()

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>SpotFinder</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <style>
    body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; margin: 24px; }
    .row { display: flex; gap: 12px; align-items: center; flex-wrap: wrap; margin-bottom: 10px; }
    input, button { padding: 6px 10px; font-size: 14px; }
    #form { display: none; }
    #map { max-width: 800px; border: 1px solid #ccc; }
  </style>
</head>
<body>
  <h2>SpotFinder</h2>
  <div class="row">
    <input id="search" placeholder="Search a location" />
    <button onclick="search()">Search</button>
    <button onclick="toggleForm('add')">Add</button>
    <button onclick="toggleForm('update')">Update</button>
    <button onclick="remove()">Delete</button>
    <button onclick="showAll()">Show all</button>
  </div>
  <div id="hint"></div>
  <div class="row" id="form">
    <input id="name" placeholder="Name" />
    <input id="lat" placeholder="Latitude" />
    <input id="lon" placeholder="Longitude" />
    <button onclick="submitForm()">Submit</button>
  </div>
  <img id="map" src="/map.png" alt="map" />

  <script>
    let action = null;
    let lastQueried = null;

    function hint(text) { document.getElementById('hint').textContent = text; }
    function focusMap(name) { document.getElementById('map').src = '/map.png?focus=' + encodeURIComponent(name) + '&t=' + Date.now(); }
    function showAll() { document.getElementById('map').src = '/map.png?t=' + Date.now(); }

    async function search() {
      const q = document.getElementById('search').value.trim();
      const resp = await fetch('/api/locations/search?q=' + encodeURIComponent(q));
      const data = await resp.json();
      if (!resp.ok) { hint(data.error); return; }
      lastQueried = data.name;
      hint('Coordinates: ' + data.coords);
      focusMap(data.name);
    }

    function toggleForm(a) {
      const form = document.getElementById('form');
      if (action === a && form.style.display === 'flex') { form.style.display = 'none'; action = null; return; }
      action = a;
      form.style.display = 'flex';
      hint(a === 'update' ? 'Enter a location in the search bar first, then edit fields below' : '');
    }

    async function submitForm() {
      const body = {
        name: document.getElementById('name').value.trim(),
        latitude: document.getElementById('lat').value.trim(),
        longitude: document.getElementById('lon').value.trim(),
      };
      let resp;
      if (action === 'add') {
        resp = await fetch('/api/locations', {method: 'POST', headers: {'Content-Type': 'application/json'}, body: JSON.stringify(body)});
      } else if (action === 'update') {
        if (!lastQueried) { hint('Search a location first before updating'); return; }
        resp = await fetch('/api/locations/' + encodeURIComponent(lastQueried), {method: 'PATCH', headers: {'Content-Type': 'application/json'}, body: JSON.stringify(body)});
      } else { return; }
      const data = await resp.json();
      if (!resp.ok) { hint(data.error); return; }
      lastQueried = data.name;
      hint((action === 'add' ? 'Added successfully: ' : 'Updated successfully: ') + data.coords);
      focusMap(data.name);
      document.getElementById('form').style.display = 'none';
      action = null;
    }

    async function remove() {
      const name = document.getElementById('search').value.trim();
      if (!name) { hint('Enter a location name to delete'); return; }
      if (!confirm('Are you sure you want to delete "' + name + '"?')) return;
      const resp = await fetch('/api/locations/' + encodeURIComponent(name), {method: 'DELETE'});
      const data = await resp.json();
      hint(resp.ok ? 'Deleted ' + name : data.error);
      showAll();
    }
  </script>
</body>
</html>
"""


def get_store() -> LocationStore:
    if "store" not in g:
        g.store = LocationStore.open(current_app.config["DB_PATH"], seed=current_app.config["SEED_ON_CREATE"])
    return g.store


def _error(message, status):
    return jsonify({"error": message}), status


def _coordinate(value):
    """None for a missing/blank value, float otherwise; ValueError if not numeric."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValueError(value)
    try:
        value = float(value)
    except OverflowError:
        raise ValueError(value) from None
    if not math.isfinite(value):
        raise ValueError(value)
    return value


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        return request.form.to_dict()
    return data if isinstance(data, dict) else {}


def create_app(db_path=None, seed=None):
    app = Flask(__name__)
    app.config["DB_PATH"] = db_path or config.DB_PATH
    app.config["SEED_ON_CREATE"] = config.SEED_ON_CREATE if seed is None else seed

    # Create and seed once up front so requests only ever open the file
    with LocationStore.open(app.config["DB_PATH"], seed=app.config["SEED_ON_CREATE"]) as store:
        logger.info("db_ready", path=app.config["DB_PATH"], count=store.count())

    @app.teardown_appcontext
    def close_store(exc):
        store = g.pop("store", None)
        if store is not None:
            store.close()

    @app.errorhandler(LocationConflict)
    def on_conflict(e):
        return _error(f"A location named {e} already exists", 409)

    @app.errorhandler(LocationNotFound)
    def on_not_found(e):
        return _error("Not found", 404)

    @app.get("/")
    def index():
        return render_template_string(TEMPLATE)

    @app.get("/api/locations")
    def list_locations():
        return jsonify([loc.as_dict() for loc in get_store().list_all()])

    @app.get("/api/locations/search")
    def search():
        query = request.args.get("q", "").strip()
        if not query:
            return _error("Enter a location to search", 400)
        loc = get_store().query_by_name(query)
        if loc is None:
            return _error(f"No record found for {query}", 404)
        return jsonify(loc.as_dict())

    @app.post("/api/locations")
    def add_location():
        data = _payload()
        name = str(data.get("name") or "").strip()
        try:
            lat = _coordinate(data.get("latitude"))
            lon = _coordinate(data.get("longitude"))
        except (TypeError, ValueError):
            lat = lon = None
        if not name or lat is None or lon is None:
            return _error("Fill in name, latitude, and longitude to add", 400)
        try:
            loc = get_store().add(name, lat, lon)
        except LocationConflict:
            return _error("Failed to add (already exists?)", 409)
        return jsonify(loc.as_dict()), 201

    @app.patch("/api/locations/<path:original>")
    def update_location(original):
        data = _payload()
        name = str(data.get("name") or "").strip() or None
        try:
            lat = _coordinate(data.get("latitude"))
            lon = _coordinate(data.get("longitude"))
        except (TypeError, ValueError):
            return _error("Latitude and longitude must be numbers", 400)
        loc = get_store().update_partial(original, name, lat, lon)
        return jsonify(loc.as_dict())

    @app.delete("/api/locations/<path:name>")
    def delete_location(name):
        deleted = get_store().delete(name)
        if not deleted:
            return _error("Address not found", 404)
        return jsonify({"deleted": deleted})

    @app.route("/map.png")
    def map_png():
        store = get_store()
        focus = request.args.get("focus", "").strip()
        if focus:
            loc = store.query_by_name(focus)
            if loc is None:
                abort(404)
            png = render_markers([], focus=loc)
        else:
            png = render_markers(store.list_all())
        return Response(png, mimetype="image/png")

    return app


def main():
    config.configure_logging()
    app = create_app()
    app.run(host="0.0.0.0", port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
