"""In-memory JSON values with UTF-8 checking, ordered objects and real-number formatting."""

__version__ = "2.12.0"
__all__ = ["strbuffer", "strconv", "utf", "value", "version"]