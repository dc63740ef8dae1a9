"""
partitionwm.tiling.partitions - Catalogo de particiones y calculador de frames.

Cada particion es una regla fraccional sobre el frame padre (la pantalla):

    +-----+-----+ +----------+ +-----+-----+ +--------------+
    |     |     | |          | |     |     | |              |
    |     |     | |    Up    | | TL  |  TR | |  +--------+  |
    |  L  |  R  | +----------+ +-----------+ |  | Centre |  |
    |     |     | |   Down   | | BL  |  BR | |  +--------+  |
    |     |     | |          | |     |     | |              |
    +-----+-----+ +----------+ +-----+-----+ +--------------+

    +---------+---------+---------+   +---------+---------+---------+
    |   TL6   |   TC6   |   TR6   |   |  Left   | Centre  |  Right  |
    +---------+---------+---------+   |  Third  |  Third  |  Third  |
    |   BL6   |   BC6   |   BR6   |   |         |         |         |
    +---------+---------+---------+   +---------+---------+---------+

Las reglas se expresan como lineas de corte (fracciones del ancho y del
alto). Cada borde se calcula como round(origen_padre + offset), de modo
que el resultado es relativo al origen del padre y no al cero global:
las pantallas de un escritorio multi-monitor pueden tener origen
desplazado o negativo. Dos particiones que comparten una linea de corte
comparten exactamente el mismo borde redondeado, asi que las
particiones complementarias cubren el padre sin huecos ni solapes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from fractions import Fraction
from types import MappingProxyType

from partitionwm.core.errors import UnknownPartitionError
from partitionwm.tiling.frame import Frame, round_half_up

log = logging.getLogger(__name__)


class Partition(enum.Enum):
    """Conjunto cerrado de particiones con nombre."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    TOP_LEFT = "topLeft"
    TOP_RIGHT = "topRight"
    BOTTOM_LEFT = "bottomLeft"
    BOTTOM_RIGHT = "bottomRight"
    CENTRE = "centre"
    LEFT_THIRD = "leftThird"
    CENTRE_THIRD = "centreThird"
    RIGHT_THIRD = "rightThird"
    LEFT_TWO_THIRDS = "left2Thirds"
    RIGHT_TWO_THIRDS = "right2Thirds"
    TOP_LEFT_SIX = "topLeftSix"
    TOP_CENTRE_SIX = "topCentreSix"
    TOP_RIGHT_SIX = "topRightSix"
    BOT_LEFT_SIX = "botLeftSix"
    BOT_CENTRE_SIX = "botCentreSix"
    BOT_RIGHT_SIX = "botRightSix"

    @classmethod
    def parse(cls, name: Partition | str) -> Partition:
        """
        Convierte un nombre ("topLeft") o un miembro en Partition.

        Raises:
            UnknownPartitionError: Si el nombre no esta en el catalogo.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownPartitionError(name) from None


@dataclass(frozen=True, slots=True)
class PartitionRule:
    """
    Regla fraccional: lineas de corte horizontales y verticales.

    Atributos:
        x0, x1: Fracciones del ancho donde empieza y termina la particion.
        y0, y1: Fracciones del alto donde empieza y termina la particion.
    """

    x0: Fraction
    x1: Fraction
    y0: Fraction
    y1: Fraction

    def apply(self, parent: Frame) -> Frame:
        """Resuelve la regla sobre *parent*, redondeando cada borde."""
        left = round_half_up(parent.x + parent.w * self.x0)
        right = round_half_up(parent.x + parent.w * self.x1)
        top = round_half_up(parent.y + parent.h * self.y0)
        bottom = round_half_up(parent.y + parent.h * self.y1)
        return Frame(left, top, right - left, bottom - top)


# Lineas de corte
_0 = Fraction(0)
_QUARTER = Fraction(1, 4)
_THIRD = Fraction(1, 3)
_HALF = Fraction(1, 2)
_TWO_THIRDS = Fraction(2, 3)
_THREE_QUARTERS = Fraction(3, 4)
_1 = Fraction(1)


def _rule(x0: Fraction, x1: Fraction, y0: Fraction, y1: Fraction) -> PartitionRule:
    return PartitionRule(x0, x1, y0, y1)


# ============================================================================
# Catalogo (inmutable)
# ============================================================================
CATALOG: MappingProxyType[Partition, PartitionRule] = MappingProxyType({
    # Mitades
    Partition.LEFT:             _rule(_0, _HALF, _0, _1),
    Partition.RIGHT:            _rule(_HALF, _1, _0, _1),
    Partition.UP:               _rule(_0, _1, _0, _HALF),
    Partition.DOWN:             _rule(_0, _1, _HALF, _1),
    # Cuartos
    Partition.TOP_LEFT:         _rule(_0, _HALF, _0, _HALF),
    Partition.TOP_RIGHT:        _rule(_HALF, _1, _0, _HALF),
    Partition.BOTTOM_LEFT:      _rule(_0, _HALF, _HALF, _1),
    Partition.BOTTOM_RIGHT:     _rule(_HALF, _1, _HALF, _1),
    # Centro: mitad de ancho y alto, centrado
    Partition.CENTRE:           _rule(_QUARTER, _THREE_QUARTERS, _QUARTER, _THREE_QUARTERS),
    # Tercios
    Partition.LEFT_THIRD:       _rule(_0, _THIRD, _0, _1),
    Partition.CENTRE_THIRD:     _rule(_THIRD, _TWO_THIRDS, _0, _1),
    Partition.RIGHT_THIRD:      _rule(_TWO_THIRDS, _1, _0, _1),
    Partition.LEFT_TWO_THIRDS:  _rule(_0, _TWO_THIRDS, _0, _1),
    Partition.RIGHT_TWO_THIRDS: _rule(_THIRD, _1, _0, _1),
    # Sextos
    Partition.TOP_LEFT_SIX:     _rule(_0, _THIRD, _0, _HALF),
    Partition.TOP_CENTRE_SIX:   _rule(_THIRD, _TWO_THIRDS, _0, _HALF),
    Partition.TOP_RIGHT_SIX:    _rule(_TWO_THIRDS, _1, _0, _HALF),
    Partition.BOT_LEFT_SIX:     _rule(_0, _THIRD, _HALF, _1),
    Partition.BOT_CENTRE_SIX:   _rule(_THIRD, _TWO_THIRDS, _HALF, _1),
    Partition.BOT_RIGHT_SIX:    _rule(_TWO_THIRDS, _1, _HALF, _1),
})

_missing = set(Partition) - set(CATALOG)
if _missing:
    raise RuntimeError(f"Particiones sin regla: {sorted(p.value for p in _missing)}")


# Grupos de particiones que cubren el padre exactamente
TILINGS: tuple[tuple[Partition, ...], ...] = (
    (Partition.LEFT, Partition.RIGHT),
    (Partition.UP, Partition.DOWN),
    (Partition.TOP_LEFT, Partition.TOP_RIGHT, Partition.BOTTOM_LEFT, Partition.BOTTOM_RIGHT),
    (Partition.LEFT_THIRD, Partition.CENTRE_THIRD, Partition.RIGHT_THIRD),
    (Partition.LEFT_THIRD, Partition.RIGHT_TWO_THIRDS),
    (Partition.LEFT_TWO_THIRDS, Partition.RIGHT_THIRD),
    (
        Partition.TOP_LEFT_SIX,
        Partition.TOP_CENTRE_SIX,
        Partition.TOP_RIGHT_SIX,
        Partition.BOT_LEFT_SIX,
        Partition.BOT_CENTRE_SIX,
        Partition.BOT_RIGHT_SIX,
    ),
)


def resolve(parent: Frame, partition: Partition | str) -> Frame:
    """
    Calcula el frame destino de una particion dentro de *parent*.

    Funcion pura: mismo padre y misma particion producen siempre el
    mismo Frame. Todas las coordenadas y tamanos son enteros.

    Args:
        parent:    Frame padre (normalmente el area visible de la pantalla).
        partition: Miembro de Partition o su nombre ("topLeft").

    Returns:
        El Frame de la particion, contenido en *parent*.

    Raises:
        UnknownPartitionError: Si el nombre no existe en el catalogo.
    """
    rule = CATALOG[Partition.parse(partition)]
    frame = rule.apply(parent)
    log.debug("resolve %s en %s -> %s", partition, parent, frame)
    return frame
