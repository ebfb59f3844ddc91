"""Small interactive demo models: boids, Game of Life, todo list, memory game, keyed lists and Markdown rendering."""

__version__ = "0.1.0"