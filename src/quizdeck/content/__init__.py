from .loader import CategoryRepository, load_categories

__all__ = ["CategoryRepository", "load_categories"]
