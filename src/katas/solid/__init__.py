"""SOLID katas: single responsibility, dependency inversion, open/closed."""
