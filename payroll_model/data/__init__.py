from .readers import DataReadError, read_roster, roster_from_frame, roster_from_records

__all__ = ["DataReadError", "read_roster", "roster_from_frame", "roster_from_records"]
