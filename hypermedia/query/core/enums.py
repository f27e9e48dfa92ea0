"""Core enumerations."""

from enum import Enum


class SortDirection(str, Enum):
    """Direction of a single sort term."""

    ASC = "ASC"
    DESC = "DESC"
