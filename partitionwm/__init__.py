"""
partitionwm - Keyboard-driven window partitioning.

Subpackages:
    - tiling : Geometry (frames, screens, partitions, screen migration, feedback)
    - core   : Actions, bindings, the host interface and the Windows host
    - config : Settings and keymaps
"""

__version__ = "1.0.0"
