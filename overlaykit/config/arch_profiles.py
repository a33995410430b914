"""Upstream parent-profile chains for each architecture.

Paths are relative to ``<gentoo repo>/profiles`` and follow the 23.0
profile tree. ``{arch}`` is replaced with the architecture name.
"""

from typing import Dict, Optional

from overlaykit.models.profile import ArchProfile, Architecture

ARCH_PROFILES = {
    'amd64': {
        'overlay_prefix': 'default/linux',
        'base': [
            'default/linux/{arch}/23.0',
            'default/linux/{arch}/23.0/llvm',
            'default/linux/{arch}/23.0/split-usr',
            'default/linux/{arch}/23.0/hardened',
        ],
        'systemd': 'default/linux/{arch}/23.0/systemd',
    },
    'arm64': {
        'overlay_prefix': 'default/linux',
        'base': [
            'default/linux/{arch}/23.0',
            'default/linux/{arch}/23.0/llvm',
            'default/linux/{arch}/23.0/split-usr',
            'default/linux/{arch}/23.0/hardened',
        ],
        'systemd': 'default/linux/{arch}/23.0/systemd',
    },
    # riscv lives under its own rv64/lp64d subtree upstream; the systemd
    # layer is assumed to sit on lp64d, not derived from the generic pattern
    'riscv64': {
        'overlay_prefix': 'hardened/linux',
        'base': [
            'default/linux/riscv/23.0/rv64/split-usr/lp64d',
            'default/linux/riscv/23.0/rv64/split-usr/lp64d/llvm',
        ],
        'systemd': 'default/linux/riscv/23.0/rv64/split-usr/lp64d/systemd',
        'use_flags': 'pic cfi',
        'requires_hardened_feature': True,
    },
}

# Shared layers appended after the arch chain
HARDENED_FEATURE = 'features/hardened'
DESKTOP_TARGET = 'targets/desktop'
OPENRC_TARGET = 'targets/openrc'


def build_arch_profiles(overrides: Optional[Dict[str, Dict]] = None) -> Dict[Architecture, ArchProfile]:
    """Build ArchProfile objects, merging per-arch overrides over the defaults."""
    overrides = overrides or {}
    result = {}
    for arch in Architecture:
        data = dict(ARCH_PROFILES[arch.value])
        data.update(overrides.get(arch.value, {}))
        result[arch] = ArchProfile(
            overlay_prefix=data['overlay_prefix'],
            base=[p.format(arch=arch.value) for p in data['base']],
            systemd=data['systemd'].format(arch=arch.value),
            use_flags=data.get('use_flags', ''),
            requires_hardened_feature=data.get('requires_hardened_feature', False),
        )
    return result
