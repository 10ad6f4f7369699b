"""2D Verlet point-mass physics with distance constraints and rectangle colliders, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["constraint", "point", "rectangle", "engine"]