"""Configuration files and upstream profile data.

Import ``overlaykit.config.loader`` directly; ``overlaykit.core.config``
depends on ``arch_profiles`` so this package does not re-export the loader.
"""
