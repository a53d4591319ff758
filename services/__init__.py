"""
Service layer for business logic.

This package contains the wire message intake pipeline and the
sequence number uniqueness check it depends on.
"""
