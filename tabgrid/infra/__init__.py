"""Infrastructure: remote row loading."""

from tabgrid.infra.remote_source import RemoteLoadError, RemoteSource, fetch_json, fetch_rows

__all__ = ["RemoteLoadError", "RemoteSource", "fetch_json", "fetch_rows"]
