"""
Internal record types.

These are plain dataclasses handed between the service layer and the
repositories.  They never leave the process; the API speaks the
schemas defined in ``schemas``.
"""
