"""Typed JSON values, containers, UTF-8 checking and number-text helpers."""

__version__ = "2.14.0"

__all__ = ["containers", "strbuffer", "strconv", "utf", "value", "version"]