# stationtraffic/viz/labels.py
from stationtraffic.traffic.aggregate import StationTraffic
from stationtraffic.traffic.filter import ANY_TIME

ANY_TIME_LABEL = "(any time)"


def format_time(minutes: int) -> str:
    """Minute of day as a short 12-hour clock string, e.g. 600 -> "10:00 AM"."""
    hh, mm = divmod(int(minutes), 60)
    suffix = "AM" if hh < 12 else "PM"
    return f"{hh % 12 or 12}:{mm:02d} {suffix}"


def time_label(time_filter: int) -> str:
    if time_filter == ANY_TIME:
        return ANY_TIME_LABEL
    return format_time(time_filter)


def traffic_tooltip(traffic: StationTraffic) -> str:
    return (
        f"{traffic.total_traffic} trips "
        f"({traffic.departures} departures, {traffic.arrivals} arrivals)"
    )
