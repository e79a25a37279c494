"""Module: tabgrid.config.remote

Date: 2026-10-19

Settings for loading grid rows from a remote JSON endpoint.
"""

REMOTE_FETCH_TIMEOUT = 10  # seconds
REMOTE_USER_AGENT = "tabgrid (Python urllib)"
REMOTE_DEFAULT_METHOD = "GET"
