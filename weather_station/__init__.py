"""Weather Station: terminal weather log for country/city picks."""

__version__ = "0.1.0"
