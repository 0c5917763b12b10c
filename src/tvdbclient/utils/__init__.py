"""Utility modules for tvdbclient."""
