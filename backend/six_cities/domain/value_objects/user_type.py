from enum import Enum


class UserType(str, Enum):
    REGULAR = "regular"
    PRO = "pro"
