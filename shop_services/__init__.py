"""
Top‑level package for the shop microservices.

Two small services live here: a user registry and an order registry.
Both are FastAPI applications built by the factories in
``shop_services.main``; the order service talks to the user service
over HTTP through ``shop_services.clients.user_client``.
"""

__all__ = []
