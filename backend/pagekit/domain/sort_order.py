from enum import Enum


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"
