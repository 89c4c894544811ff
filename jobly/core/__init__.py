"""
Core application utilities.

This package provides:
- Application-level settings (separate from DB settings)
- Logging configuration with request correlation ids
- Domain error types raised by repositories
"""
