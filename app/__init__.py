"""
HTTP boundary for the wire message service.
"""
