"""
Core infrastructure: configuration, logging, database access and the
exception types shared across layers.
"""
