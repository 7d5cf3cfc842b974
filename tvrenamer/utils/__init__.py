"""Utility functions."""

from tvrenamer.utils.changelog import enable_change_log, is_change_record, record_change

__all__ = ["enable_change_log", "is_change_record", "record_change"]
