"""Domain models shared by the repository and service layers."""

from .employee import Employee

__all__ = ["Employee"]
