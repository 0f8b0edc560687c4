from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator
from pydantic.alias_generators import to_camel


class _FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Point(_FrozenModel):
    x: float = Field(..., description="Horizontal coordinate, origin at page left")
    y: float = Field(..., description="Vertical coordinate, origin at page top")


class Line(_FrozenModel):
    """A line of OCR text with its bounding rectangle."""

    text: str
    bounding_polygon: tuple[Point, Point, Point, Point] = Field(
        ...,
        description="Rectangle corners: top-left, top-right, bottom-right, bottom-left.",
    )

    @model_validator(mode="after")
    def _check_winding(self) -> "Line":
        top_left, top_right, bottom_right, bottom_left = self.bounding_polygon
        if top_left.x > top_right.x or bottom_left.x > bottom_right.x:
            raise ValueError("boundingPolygon must list left corners before right corners")
        if top_left.y > bottom_left.y or top_right.y > bottom_right.y:
            raise ValueError("boundingPolygon must list top corners before bottom corners")
        return self


class Page(_FrozenModel):
    lines: list[Line] = Field(default_factory=list)


class Document(_FrozenModel):
    """Standardized OCR text: pages of lines."""

    pages: list[Page] = Field(default_factory=list)


class AnchorReference(_FrozenModel):
    page_index: NonNegativeInt
    line: Line
