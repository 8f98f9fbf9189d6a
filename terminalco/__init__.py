"""A text-terminal game about moons, store items and strange creatures, with MongoDB storage."""

__version__ = "0.1.0"