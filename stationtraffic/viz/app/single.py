# stationtraffic/viz/app/single.py
from __future__ import annotations

import logging
import math
from pathlib import Path

from flask import Flask, abort, jsonify, request

from stationtraffic.traffic.by_window import trip_counts_by_hour
from stationtraffic.traffic.filter import ANY_TIME
from stationtraffic.util.stations import load_stations
from stationtraffic.util.trips import load_trips
from stationtraffic.viz.maps.render import CENTER_LAT, CENTER_LON, ZOOM_START, render_map_document
from stationtraffic.viz.projection import Viewport
from stationtraffic.viz.update import TrafficMap

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 768

# the served folium map is Leaflet, which uses 256 px tiles
LEAFLET_TILE_SIZE = 256


def _snapshot_json(traffic_map: TrafficMap, snapshot):
    stations = []
    for s in traffic_map.stations:
        traffic = snapshot.metrics[s.short_name]
        attrs = snapshot.attributes[s.short_name]
        stations.append({
            "short_name": s.short_name,
            "arrivals": traffic.arrivals,
            "departures": traffic.departures,
            "total_traffic": traffic.total_traffic,
            "radius": attrs.radius,
            "departure_ratio": attrs.departure_ratio,
            "color": attrs.color,
            "tooltip": attrs.tooltip,
        })

    return {
        "time_filter": snapshot.time_filter,
        "time_label": snapshot.time_label,
        "radius_range": list(snapshot.radius_range),
        "transition_ms": snapshot.transition_ms,
        "stations": stations,
    }


def _arg(name, default, convert):
    """
    Query parameter converted with `convert`; the default applies only when
    the parameter is absent. Anything unparseable is a 400.
    """
    raw = request.args.get(name)
    if raw is None:
        return default
    try:
        value = convert(raw)
    except ValueError:
        abort(400, description=f"invalid {name}: {raw!r}")
    if isinstance(value, float) and not math.isfinite(value):
        abort(400, description=f"invalid {name}: {raw!r}")
    return value


def _apply_time_filter(traffic_map: TrafficMap):
    t = _arg("t", ANY_TIME, int)
    try:
        return traffic_map.set_time_filter(t)
    except ValueError as e:
        abort(400, description=str(e))


def create_app(
    traffic_map: TrafficMap,
    *,
    title: str | None = None,
    bike_lanes: bool = True,
) -> Flask:
    """
    Routes:
      /                HTML map for ?t=
      /traffic.json    per-station metrics + marker attributes for ?t=
      /positions.json  projected pixel positions for a viewport change
    """
    hourly_counts = trip_counts_by_hour(traffic_map.trips)

    app = Flask(__name__)

    @app.route("/")
    def _index():
        snapshot = _apply_time_filter(traffic_map)
        return render_map_document(
            stations=traffic_map.stations,
            snapshot=snapshot,
            hourly_counts=hourly_counts,
            title=title,
            bike_lanes=bike_lanes,
        )

    @app.route("/traffic.json")
    def _traffic():
        snapshot = _apply_time_filter(traffic_map)
        return jsonify(_snapshot_json(traffic_map, snapshot))

    @app.route("/positions.json")
    def _positions():
        event = request.args.get("event", "moveend")
        viewport = Viewport(
            center_lon=_arg("lon", CENTER_LON, float),
            center_lat=_arg("lat", CENTER_LAT, float),
            zoom=_arg("zoom", ZOOM_START, float),
            width=_arg("width", DEFAULT_WIDTH, int),
            height=_arg("height", DEFAULT_HEIGHT, int),
            tile_size=LEAFLET_TILE_SIZE,
        )
        try:
            update = traffic_map.viewport_changed(event, viewport)
        except ValueError as e:
            abort(400, description=str(e))

        return jsonify({
            "event": update.event,
            "transition_ms": update.transition_ms,
            "positions": {
                code: {"x": x, "y": y} for code, (x, y) in update.positions.items()
            },
        })

    return app


def serve_traffic_map(
    *,
    stations_file: str | Path,
    trips_csv: str | Path,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = None,
):
    """
    Load the roster and the trip log, then serve the interactive map.
    Load errors propagate; there is nothing to serve without both inputs.
    """
    stations = load_stations(stations_file)
    trips = load_trips(trips_csv)

    traffic_map = TrafficMap(stations, trips)
    app = create_app(traffic_map, title=title)

    app.run(host=host, port=int(port), debug=bool(debug))
