"""Sheet ingestion pipeline.

This module fetches remote grids and turns their rows into validated
entries for the store layer.
"""
