from enum import Enum

class PopularityEnum(str, Enum):
    unknown = "unknown"
    known = "known"
    popular = "popular"
