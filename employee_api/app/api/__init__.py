"""
API package containing the HTTP routes.

``router`` aggregates the domain routers; ``dependencies`` builds the
services handed to route handlers.
"""
