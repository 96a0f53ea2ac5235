"""Book and customer records in fixed-size binary files, with console menus."""

__version__ = "0.1.0"
__all__ = ["records", "books", "customers", "console"]