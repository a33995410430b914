"""Exception types raised by overlaykit."""


class ConfigError(Exception):
    """Raised when an overlaykit configuration file or value is invalid."""
    pass


class ScaffoldError(Exception):
    """Raised when the overlay skeleton cannot be created."""
    pass


class RepositoryDiscoveryError(Exception):
    """Raised when installed repositories cannot be listed."""
    pass
