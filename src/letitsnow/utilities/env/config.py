from letitsnow.utilities.env.animation import AnimationConfiguration
from letitsnow.utilities.env.runtime import RuntimeConfiguration


class Configuration(AnimationConfiguration, RuntimeConfiguration):
    """Aggregate environment configuration helpers."""
