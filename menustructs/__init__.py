"""Bounded and linked queues, a linked stack, a singly linked list and menu programs for them."""

__version__ = "0.1.0"

__all__ = ["__version__"]