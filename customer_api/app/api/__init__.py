"""
API package containing the HTTP routes.

``router`` aggregates the domain routers, ``deps`` exposes FastAPI
dependencies and ``error_handlers`` maps service failures onto status
codes.
"""
