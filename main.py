# main.py
import logging
import os

from colorama import Fore, Style

from stationtraffic.traffic.by_window import build_station_traffic_by_window
from stationtraffic.util.stations import load_stations
from stationtraffic.util.trips import load_trips
from stationtraffic.viz.app.single import create_app
from stationtraffic.viz.update import TrafficMap


STATIONS = os.environ.get("STATIONS_JSON", "bluebikes-stations.json")
TRIPS = os.environ.get("TRIPS_CSV", "bluebikes-traffic-2024-03.csv")
EXPORT_CSV = os.environ.get("EXPORT_CSV")


def main():
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    # ---- load both inputs before anything becomes interactive ----
    print(f"{Fore.CYAN}Loading station roster…{Style.RESET_ALL}")
    stations = load_stations(STATIONS)

    print(f"{Fore.CYAN}Loading trips…{Style.RESET_ALL}")
    trips = load_trips(TRIPS)

    print(
        f"{Fore.GREEN}Loaded {len(stations)} stations, {len(trips)} trips{Style.RESET_ALL}"
    )

    # ---- optional per-window export ----
    if EXPORT_CSV:
        print(f"{Fore.CYAN}Writing {EXPORT_CSV}…{Style.RESET_ALL}")
        build_station_traffic_by_window(
            stations=stations,
            trips=trips,
            out_csv_path=EXPORT_CSV,
        )
        print(f"{Fore.GREEN}Export complete.{Style.RESET_ALL}")

    # ---- UI ----
    traffic_map = TrafficMap(stations, trips)
    app = create_app(traffic_map, title="Bike Share Station Traffic")
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "8080")),
    )


if __name__ == "__main__":
    main()
