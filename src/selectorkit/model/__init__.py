from selectorkit.model.shapes import Circle, Rectangle

__all__ = ["Circle", "Rectangle"]
