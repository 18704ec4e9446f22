"""
Boundary layer.

Adapters to external systems: the remote vector store.
"""
