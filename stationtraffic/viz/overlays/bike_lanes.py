# stationtraffic/viz/overlays/bike_lanes.py
import json

import folium

BIKE_LANE_SOURCES = {
    "boston": "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
    "cambridge": "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson",
}

BIKE_LANE_STYLE = {"color": "#32D400", "weight": 3, "opacity": 0.7}


def add_bike_lanes(m, sources=None, style=None):
    """
    Draw bike-lane GeoJSON layers under the station markers.

    The browser fetches each URL when the page loads; nothing is downloaded
    or parsed on the server. A source that fails to load is skipped.
    """
    sources = BIKE_LANE_SOURCES if sources is None else sources
    if not sources:
        return

    m.get_root().html.add_child(
        folium.Element(
            f"""
<script>
document.addEventListener("DOMContentLoaded", () => {{
  const map = {m.get_name()};
  const style = {json.dumps(style or BIKE_LANE_STYLE)};
  const sources = {json.dumps(sources)};

  Object.entries(sources).forEach(([name, url]) => {{
    fetch(url)
      .then((r) => r.json())
      .then((data) => {{
        const layer = L.geoJSON(data, {{ style: () => style }}).addTo(map);
        layer.bringToBack();
      }})
      .catch((e) => console.warn("bike lanes " + name + " not loaded", e));
  }});
}});
</script>
"""
        )
    )
