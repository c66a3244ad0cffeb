"""Runnable example: a card game's state and requests."""
