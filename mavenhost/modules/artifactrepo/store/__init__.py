from .ignore import IgnoreRules, copy_tree
from .project_store import ProjectStore, sanitize_name

__all__ = ["IgnoreRules", "ProjectStore", "copy_tree", "sanitize_name"]
