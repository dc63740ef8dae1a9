"""
partitionwm.tiling.frame - Estructuras geometricas Frame y Point.

Define un rectangulo inmutable que representa un area de pantalla en un
espacio de coordenadas concreto, y las conversiones entre el espacio
global (origen arriba-izquierda, Y hacia abajo) y el espacio invertido
(origen abajo-izquierda, Y hacia arriba).
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

Number = float | int


class CoordinateSpace(enum.Enum):
    """Espacio de coordenadas en el que se expresa un Frame."""
    GLOBAL = "global"
    FLIPPED = "flipped"


def round_half_up(value: Number) -> int:
    """Redondea al entero mas cercano; .5 siempre sube (nunca bancario)."""
    return math.floor(value + 0.5)


@dataclass(frozen=True, slots=True)
class Point:
    """Punto (x, y), p.ej. la posicion del puntero."""

    x: Number
    y: Number


@dataclass(frozen=True, slots=True)
class Frame:
    """
    Rectangulo inmutable definido por posicion (x, y) y dimensiones (w, h).

    Las coordenadas son puntos de pantalla y pueden ser reales. El espacio
    de coordenadas no se guarda en el Frame: lo fija quien lo produce
    (la pantalla, el host o el calculador de particiones).

    Atributos:
        x: Coordenada horizontal del origen.
        y: Coordenada vertical del origen.
        w: Ancho (nunca negativo).
        h: Alto (nunca negativo).
    """

    x: Number
    y: Number
    w: Number
    h: Number

    def __post_init__(self) -> None:
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Frame con tamano negativo: {self.w}x{self.h}")

    # ------------------------------------------------------------------
    # Propiedades derivadas
    # ------------------------------------------------------------------
    @property
    def center(self) -> Point:
        return Point(self.x + self.w / 2, self.y + self.h / 2)

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    def same_size(self, other: Frame) -> bool:
        """True si ancho y alto coinciden exactamente."""
        return self.w == other.w and self.h == other.h

    def rounded(self) -> Frame:
        """Copia con todas las coordenadas redondeadas a enteros."""
        return Frame(
            round_half_up(self.x),
            round_half_up(self.y),
            round_half_up(self.w),
            round_half_up(self.h),
        )

    # ------------------------------------------------------------------
    # Conversion entre espacios de coordenadas
    # ------------------------------------------------------------------
    def flipped(self, primary_height: Number) -> Frame:
        """
        Refleja el frame respecto al alto del monitor primario.

        Global -> invertido e invertido -> global son la misma operacion:
        la y del borde opuesto se mide desde el otro extremo.
        """
        return Frame(self.x, primary_height - (self.y + self.h), self.w, self.h)

    def to_space(
        self,
        source: CoordinateSpace,
        target: CoordinateSpace,
        primary_height: Number,
    ) -> Frame:
        """Convierte el frame de *source* a *target*."""
        if source == target:
            return self
        return self.flipped(primary_height)

    @classmethod
    def from_ltrb(cls, left: Number, top: Number, right: Number, bottom: Number) -> Frame:
        """Crea un Frame desde coordenadas Win32 (left, top, right, bottom)."""
        return cls(left, top, right - left, bottom - top)

    # ------------------------------------------------------------------
    # Representacion
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return f"Frame({self.w}x{self.h}+{self.x}+{self.y})"
