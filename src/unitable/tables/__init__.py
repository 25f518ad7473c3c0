from unitable.tables.registry import TableRegistry, normalize_name

__all__ = ["TableRegistry", "normalize_name"]
