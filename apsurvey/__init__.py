"""Wi-Fi access point survey with client counting, GPS tagging and tabular reports."""

__version__ = "0.1.0"

__all__ = ["clients", "models", "nmea", "pager", "report", "scanner"]