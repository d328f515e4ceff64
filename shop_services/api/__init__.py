"""
API package containing the HTTP routes of both services.

Routers for each domain live in ``endpoints``; ``deps`` exposes the
FastAPI dependencies that pull per-application state (stores, clients,
settings) off ``request.app.state``.
"""
