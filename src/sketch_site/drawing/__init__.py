from .drawing import DrawableItem, create_drawable_items, draw_components

__all__ = ["DrawableItem", "create_drawable_items", "draw_components"]
