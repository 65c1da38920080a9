"""Entry storage layer.

This module holds the store interface, its in-memory and file-backed
implementations, and the full-replace synchronizer used after a load.
"""
