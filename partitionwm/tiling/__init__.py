"""
partitionwm.tiling - Motor de particiones (geometria pura).

Este paquete contiene:
    - frame      : Frame, Point y conversion entre espacios de coordenadas
    - screen     : Screen - pantalla con area total y area visible
    - partitions : Catalogo de particiones y calculador de frames
    - migration  : Planificador de cambio de pantalla
    - feedback   : Etiquetas de direccion y de particion para el overlay
    - monitor    : Deteccion de pantallas via pywin32 (solo Windows, no se
                   importa aqui)
"""

from partitionwm.tiling.frame import CoordinateSpace, Frame, Point
from partitionwm.tiling.screen import Screen
from partitionwm.tiling.partitions import Partition, resolve
from partitionwm.tiling.migration import MigrationPlan, plan
from partitionwm.tiling.feedback import direction_label, partition_label

__all__ = [
    "CoordinateSpace",
    "Frame",
    "Point",
    "Screen",
    "Partition",
    "resolve",
    "MigrationPlan",
    "plan",
    "direction_label",
    "partition_label",
]
