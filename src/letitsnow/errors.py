class LetItSnowError(RuntimeError):
    """Base class for failures raised while animating the target document."""


class ConfigurationError(ValueError):
    """Raised when animation settings cannot produce a valid trajectory."""


class TargetFileError(LetItSnowError):
    """Raised when the target document is missing or unusable."""


class FragmentNotFoundError(LetItSnowError):
    """Raised when no line of the target document carries the fragment."""
