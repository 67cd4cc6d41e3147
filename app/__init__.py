"""Mouloudia Tiznit volleyball club site."""
