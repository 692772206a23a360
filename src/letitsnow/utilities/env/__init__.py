"""Environment configuration helpers."""

from letitsnow.utilities.env.config import Configuration as Configuration
from letitsnow.utilities.env.enums import \
    MissingFragmentStrategy as MissingFragmentStrategy
