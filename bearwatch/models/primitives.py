"""
Shared primitive data types.

Basic geometric types used by the framework and the games built on it.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions and offsets.

    Coordinates can be positive, negative, or zero: pointer samples outside
    the playfield are ordinary points.

    Attributes:
        x: X coordinate (horizontal, grows to the right)
        y: Y coordinate (vertical, grows downwards)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> outside = Point2D(x=-15.0, y=2000.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


Vector2D = Point2D


class Extent(BaseModel):
    """Visual footprint of a sprite.

    Clamping keeps a sprite's centre at least half its extent away from
    every playfield edge.

    Examples:
        >>> fox = Extent(width=90, height=70)
        >>> fox.half_width
        45.0
    """
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @computed_field
    @property
    def half_height(self) -> float:
        return self.height / 2.0

    def __str__(self) -> str:
        return f"Extent({self.width:g}x{self.height:g})"


class Resolution(BaseModel):
    """Window or playfield resolution in pixels.

    Examples:
        >>> hd = Resolution(width=1280, height=720)
        >>> hd.aspect_ratio
        1.7777777777777777
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    @computed_field
    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Resolution({self.width}x{self.height})"

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse 'WIDTHxHEIGHT'.

        Raises:
            ValueError: If the text is not two integers separated by 'x'
        """
        width, height = text.lower().split('x')
        return cls(width=int(width), height=int(height))
