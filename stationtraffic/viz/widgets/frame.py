# stationtraffic/viz/widgets/frame.py
import json

import folium

MAP_HEIGHT = "75vh"
MAP_MIN_HEIGHT_PX = 520


def build_map_frame(title=None):
    """
    Wraps the Leaflet container in #map-wrap so the legend and time filter
    can float over the map, and adds the optional title pill.

    Must be added before the other widgets: they look up #map-wrap in their
    own DOMContentLoaded handlers.
    """
    title_js = ""
    if title:
        title_js = (
            "const pill = document.createElement('div');"
            "pill.id = 'map-title';"
            f"pill.textContent = {json.dumps(title)};"
            "wrap.appendChild(pill);"
        )

    return folium.Element(
        f"""
<style>
#map-wrap {{ position: relative; width: 100%; }}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: {MAP_HEIGHT} !important;
  min-height: {MAP_MIN_HEIGHT_PX}px;
}}
#map-title {{
  position: absolute; top: 12px; left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px; border-radius: 999px;
  font-size: 14px; font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl || document.getElementById("map-wrap")) return;

  const wrap = document.createElement("div");
  wrap.id = "map-wrap";
  mapEl.parentNode.insertBefore(wrap, mapEl);
  wrap.appendChild(mapEl);
  {title_js}
}});
</script>
"""
    )
