from __future__ import annotations


class DashboardError(Exception):
    """Base class for failures raised by the dashboard pipeline."""


class NoTabularDataError(DashboardError):
    """The text layer does not contain enough table-shaped lines."""


class StorageError(DashboardError):
    """A rendered report could not be written to its destination."""
