"""Schema validation for drawing primitives and display profiles.

Provides centralized validation using pydantic:
    - Geometry specs: Point3, CircleSpec, CurveSpec (builder inputs)
    - Display schema (display.v1.yaml): resolution, draw color, background

Builders validate their arguments through these models so malformed input
fails fast, before an edge matrix is touched.

Units:
    - Geometry: screen units (pixels), y axis pointing up
    - Color: integer RGB in [0, 255]

Usage:
    from src.utils import validators

    display_cfg = validators.load_display_config("configs/display_v1.yaml")
    center = validators.Point3(x=250, y=250, z=0)
"""

from pathlib import Path
from typing import Annotated, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]
Channel = Annotated[int, Field(ge=0, le=255)]
RGB = Tuple[Channel, Channel, Channel]
Point2 = Tuple[FiniteFloat, FiniteFloat]


# ============================================================================
# GEOMETRY SPECS
# ============================================================================

class Point3(BaseModel):
    """Point in drawing space. Stored in edge matrices as (x, y, z, 1)."""
    model_config = ConfigDict(frozen=True)

    x: FiniteFloat
    y: FiniteFloat
    z: FiniteFloat = 0.0

    def homogeneous(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, 1.0)


class CircleSpec(BaseModel):
    """Circle outline: center and radius. Only x, y of the center are sampled."""
    model_config = ConfigDict(frozen=True)

    center: Point3
    radius: FiniteFloat = Field(..., ge=0.0, description="Radius in screen units")


class CurveSpec(BaseModel):
    """Cubic curve inputs.

    For Bézier curves p0..p3 are the control points. For Hermite curves p0, p1
    are the endpoints and p2, p3 the tangents at p0 and p1.
    """
    model_config = ConfigDict(frozen=True)

    p0: Point2
    p1: Point2
    p2: Point2
    p3: Point2
    step: FiniteFloat = Field(..., gt=0.0, le=1.0, description="Parameter increment")

    def x_row(self) -> Tuple[float, float, float, float]:
        return (self.p0[0], self.p1[0], self.p2[0], self.p3[0])

    def y_row(self) -> Tuple[float, float, float, float]:
        return (self.p0[1], self.p1[1], self.p2[1], self.p3[1])


# ============================================================================
# DISPLAY SCHEMA V1
# ============================================================================

class DisplayV1(BaseModel):
    """Display profile (display.v1.yaml schema).

    Framebuffer is yres rows × xres columns, row 0 at the top.
    """
    model_config = ConfigDict(populate_by_name=True)

    schema_version: str = Field("display.v1", alias="schema", description="Schema version")
    xres: int = Field(500, gt=0, description="Horizontal resolution (columns)")
    yres: int = Field(500, gt=0, description="Vertical resolution (rows)")
    draw_color: RGB = Field((0, 0, 0), description="Color written by plot()")
    background: RGB = Field((255, 255, 255), description="Fill for new screens")

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "display.v1":
            raise ValueError(f"Expected schema 'display.v1', got '{v}'")
        return v


# ============================================================================
# LOADERS
# ============================================================================

def load_display_config(path: Union[str, Path]) -> DisplayV1:
    """Load and validate a display profile from YAML.

    Parameters
    ----------
    path : Union[str, Path]
        Path to display.v1.yaml file

    Returns
    -------
    DisplayV1
        Validated display configuration

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Display profile not found: {path}")

    data = fs.load_yaml(path)
    try:
        return DisplayV1(**data)
    except Exception as e:
        raise ValueError(f"Display profile validation failed at {path}: {e}") from e
