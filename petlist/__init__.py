"""A singly linked list, pet record helpers and a demo walkthrough."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "pets", "demo"]