"""
Copyright (c) 2024 Aiven Ltd
See LICENSE for details
"""


class SnapshotUnavailable(Exception):
    """Cluster metadata could not be fetched within the configured timeout."""
