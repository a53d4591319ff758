"""
Core modules for wire message intake.

This package contains:
- auth: Session token issuing and verification
- config: Application configuration and settings
- db: Database access layer
- exceptions: Custom exception classes
- logger: Logging configuration
- parsing: Wire message parsing
- schema: Pydantic models for wire messages
- validators: Field-level format predicates
"""
