import sys

from weather_station.main import run

sys.exit(run())
