# stationtraffic/viz/widgets/legend.py
import folium

from stationtraffic.traffic.scales import DEPARTURE_RATIO_BUCKETS, departure_color

_BUCKET_NAMES = {0.0: "More arrivals", 0.5: "Balanced", 1.0: "More departures"}


def build_legend_widget():
    """
    Floating legend for the departure-ratio colours, one row per bucket.
    """
    rows = "".join(
        f'<div><span style="color:{departure_color(b)}">●</span> {_BUCKET_NAMES[b]}</div>'
        for b in reversed(DEPARTURE_RATIO_BUCKETS)
    )

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  top: 12px;
  right: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
</style>

<div id="map-legend"><strong>Traffic flow</strong>{rows}</div>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const wrap = document.getElementById("map-wrap");
  const legend = document.getElementById("map-legend");
  if (wrap && legend) wrap.appendChild(legend);
}});
</script>
"""
    )
