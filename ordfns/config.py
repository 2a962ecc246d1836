"""Configuration for the ordfns dispatcher."""

from dataclasses import dataclass

from .core.exceptions import ConfigurationError


@dataclass(frozen=True)
class Config:
    """ordfns configuration.

    Frozen so that a config can key the cached behavior table. Nothing
    here changes how values compare or score; callers opt in by passing
    ``config=`` to a dispatcher entry point.
    """

    # Log a warning whenever an integer score is not exact (|value| > 2**53)
    warn_precision_loss: bool = False

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.warn_precision_loss, bool):
            raise ConfigurationError(
                f"Invalid warn_precision_loss {self.warn_precision_loss!r}. "
                f"Must be True or False",
                config_key="warn_precision_loss",
            )


# Used whenever no config is passed
DEFAULT_CONFIG = Config()
