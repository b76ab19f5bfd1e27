"""Domain layer for plan generation.

Pure business logic (metrics, catalogs, selection, validation and the
deterministic builders), decoupled from the generative model and storage.
"""
