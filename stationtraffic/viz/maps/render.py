# stationtraffic/viz/maps/render.py
import folium

from stationtraffic.viz.overlays.bike_lanes import add_bike_lanes
from stationtraffic.viz.overlays.stations import add_station_markers
from stationtraffic.viz.widgets.frame import build_map_frame
from stationtraffic.viz.widgets.legend import build_legend_widget
from stationtraffic.viz.widgets.time_slider import build_time_slider

# Boston / Cambridge
CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18


def render_map_document(
    *,
    stations,
    snapshot,
    hourly_counts=None,
    title: str | None = None,
    bike_lanes: bool = True,
):
    """
    Single place that assembles the full Folium map HTML document.
    """

    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    # stations
    add_station_markers(m, stations, snapshot)

    # bike lanes (loaded by the browser)
    if bike_lanes:
        add_bike_lanes(m)

    # frame first: the other widgets attach to #map-wrap
    m.get_root().html.add_child(build_map_frame(title))
    m.get_root().html.add_child(build_legend_widget())
    m.get_root().html.add_child(build_time_slider(snapshot.time_filter, hourly_counts))

    return m.get_root().render()
