"""
Service layer: external collaborators (corpus download, semantic expansion)
and the selection export sink.
"""
