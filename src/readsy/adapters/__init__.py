"""Adapters connecting the reconciliation core to HTTP sources and storage."""
