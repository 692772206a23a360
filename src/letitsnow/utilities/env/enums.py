from enum import StrEnum


class MissingFragmentStrategy(StrEnum):
    WARN = "warn"
    FATAL = "fatal"
