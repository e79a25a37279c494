"""Core engines: grid data (tabgrid.core.grid) and column layout (tabgrid.core.layout)."""
