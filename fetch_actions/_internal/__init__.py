"""Internal modules for fetch-actions.

WARNING: This package contains implementation modules used by the verb helpers.
These are not intended for direct use in application code.

Modules:
    pipeline - Request pipeline, parameter transformer and models
    http - Default transport built on httpx
    debug - Diagnostics written to stderr
    redaction - Masking of sensitive headers in diagnostics
"""
