# stationtraffic/viz/widgets/time_slider.py
import folium

from stationtraffic.traffic.filter import ANY_TIME, MINUTES_PER_DAY
from stationtraffic.viz.labels import ANY_TIME_LABEL, format_time

BAR_MAX_PX = 48


def build_time_slider(time_filter, hourly_counts=None, *, key="t"):
    """
    Time filter control:
      - slider from ANY_TIME (-1) to 1439, reloads the page with ?t=
      - selected time label, or "(any time)" for the sentinel
      - bars = trips starting in each hour; clicking a bar jumps to it
    """
    hourly_counts = list(hourly_counts or [])
    max_count = max(hourly_counts, default=0)

    bars = []
    for hour, cnt in enumerate(hourly_counts):
        height = int((cnt / max_count) * BAR_MAX_PX) if max_count > 0 else 0
        t = hour * 60
        active = time_filter != ANY_TIME and time_filter // 60 == hour
        bars.append(
            f"""
            <div class="slider-item"
                 onclick="setTime({t})"
                 title="{format_time(t)}: {cnt} trips">
              <div class="slider-bar"
                   style="height:{height}px; opacity:{'1.0' if active else '0.55'};">
              </div>
            </div>
            """
        )

    is_any = time_filter == ANY_TIME
    selected = "" if is_any else format_time(time_filter)

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  left: 16px;
  right: 16px;
  bottom: 14px;
  z-index: 1200;
  background: rgba(255,255,255,0.92);
  border-radius: 10px;
  padding: 8px 12px;
  font-size: 12px;
}}

#time-filter-bars {{
  display: flex;
  align-items: flex-end;
  height: {BAR_MAX_PX}px;
  gap: 2px;
}}

.slider-item {{
  flex: 1;
  display: flex;
  align-items: flex-end;
  height: 100%;
  cursor: pointer;
}}

.slider-bar {{
  width: 100%;
  background: steelblue;
  border-radius: 2px;
}}

#time-slider {{
  width: 100%;
}}

#any-time {{
  color: #777;
  font-style: italic;
  display: {'block' if is_any else 'none'};
}}
</style>

<div id="time-filter">
  <label>Filter by time: <time id="selected-time">{selected}</time></label>
  <em id="any-time">{ANY_TIME_LABEL}</em>
  <div id="time-filter-bars">
    {''.join(bars)}
  </div>
  <input id="time-slider" type="range"
         min="{ANY_TIME}" max="{MINUTES_PER_DAY - 1}" value="{time_filter}">
</div>

<script>
function formatTime(minutes) {{
  const h = Math.floor(minutes / 60);
  const m = minutes % 60;
  const suffix = h < 12 ? "AM" : "PM";
  return `${{h % 12 || 12}}:${{String(m).padStart(2, "0")}} ${{suffix}}`;
}}

function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("{key}", String(t));
  window.location.href = url.toString();
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (!slider) return;

  slider.addEventListener("input", () => {{
    const t = Number(slider.value);
    selected.textContent = t === {ANY_TIME} ? "" : formatTime(t);
    anyTime.style.display = t === {ANY_TIME} ? "block" : "none";
  }});
  slider.addEventListener("change", () => setTime(Number(slider.value)));

  const wrap = document.getElementById("map-wrap");
  const panel = document.getElementById("time-filter");
  if (wrap && panel) wrap.appendChild(panel);
}});
</script>
"""
    )
