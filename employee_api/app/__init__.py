"""
Application package for the Employee API.

Contains configuration (``core``), the domain model (``models``),
persistence (``repositories``), business logic (``services``), API
payload schemas (``schemas``) and HTTP routes (``api``).
"""
