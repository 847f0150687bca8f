from stationtraffic.util.stations import stations_from_records
from stationtraffic.util.trips import trips_frame


def make_stations(*codes):
    return stations_from_records(
        {"short_name": c, "lon": str(-71.09 + i * 0.01), "lat": str(42.36 + i * 0.01)}
        for i, c in enumerate(codes)
    )


def make_trips(*rows):
    """rows: (start, end, started_at, ended_at)"""
    return trips_frame(
        {
            "start_station_id": s,
            "end_station_id": e,
            "started_at": t0,
            "ended_at": t1,
        }
        for s, e, t0, t1 in rows
    )
