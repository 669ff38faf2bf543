from .todo_export import TodoItem, export_to_todos

__all__ = ["TodoItem", "export_to_todos"]
