"""Ant colony simulation: ants, roles, resources, enemies and a yearly game window."""

__version__ = "0.1.0"
__all__ = ["ant", "anthill", "button", "enemy", "events", "game", "roles"]