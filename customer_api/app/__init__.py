"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The code is organised in thin layers: ``schemas`` hold
the wire representation, ``models`` the internal record, the
``repositories`` package talks to the relational store, ``services``
own the business rules and ``api`` maps HTTP requests onto them.
"""

from .main import app  # noqa: F401
