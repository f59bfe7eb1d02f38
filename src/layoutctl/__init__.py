"""layoutctl — build nested table layouts from module templates and export them as markup."""

__version__ = "0.3.0"
