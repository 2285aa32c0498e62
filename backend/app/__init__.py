"""Wanderlust Travel backend."""
