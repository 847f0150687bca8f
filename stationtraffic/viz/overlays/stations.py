import html

import folium

STROKE_COLOR = "#ffffff"
FILL_OPACITY = 0.6


def add_station_markers(m, stations, snapshot):
    """
    Draw one circle per station, sized and coloured from the snapshot.
    snapshot: TrafficSnapshot (attributes keyed by station short_name)
    """
    for s in stations:
        attrs = snapshot.attributes.get(s.short_name)
        if attrs is None:
            continue

        title = f"<b>{html.escape(s.name)}</b><br>" if s.name else ""

        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=attrs.radius,
            color=STROKE_COLOR,
            weight=1,
            fill=True,
            fill_color=attrs.color,
            fill_opacity=FILL_OPACITY,
            tooltip=f"{title}{attrs.tooltip}",
        ).add_to(m)
