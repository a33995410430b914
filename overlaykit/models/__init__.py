"""Data models for overlaykit."""
from overlaykit.models.errors import (
    ConfigError,
    RepositoryDiscoveryError,
    ScaffoldError,
)
from overlaykit.models.profile import (
    PROFILE_FILES,
    ArchProfile,
    Architecture,
    InitSystem,
    Profile,
    RegistryEntry,
)

__all__ = [
    'Architecture',
    'ArchProfile',
    'InitSystem',
    'Profile',
    'RegistryEntry',
    'PROFILE_FILES',
    'ConfigError',
    'RepositoryDiscoveryError',
    'ScaffoldError',
]
