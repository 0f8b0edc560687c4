from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    PositiveInt,
    Tag,
    field_validator,
)
from pydantic.alias_generators import to_camel

from app.schemas.document import Document, Line

HorizontalDirection = Literal["right", "left"]
Direction = Literal["right", "left", "below", "above"]
Tiebreaker = Union[PositiveInt, Literal["last"]]

_TIEBREAKER_WORDS = {"first": 1, "second": 2}


class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    anchor: str = Field(..., description="Exact text of the anchor line.")
    case_sensitive: bool = Field(
        default=True,
        description="Set to false to compare anchor text case-insensitively.",
    )


class LabelConfig(_ConfigModel):
    """Value offset from the anchor in one direction, aligned to one of its edges."""

    kind: Literal["label"] = Field(default="label", validation_alias=AliasChoices("kind", "id"))
    position: Direction
    text_alignment: HorizontalDirection


class RowConfig(_ConfigModel):
    """Value on the anchor's row, picked among same-row candidates by a tiebreaker."""

    kind: Literal["row"] = Field(default="row", validation_alias=AliasChoices("kind", "id"))
    position: HorizontalDirection
    tiebreaker: Tiebreaker = 1

    @field_validator("tiebreaker", mode="before")
    @classmethod
    def _legacy_tiebreaker(cls, value: Any) -> Any:
        """Accept the older "first"/"second" spelling."""

        if isinstance(value, str) and value.strip().lower() in _TIEBREAKER_WORDS:
            return _TIEBREAKER_WORDS[value.strip().lower()]
        return value


def _config_kind(value: Any) -> str | None:
    if isinstance(value, dict):
        return value.get("kind", value.get("id"))
    return getattr(value, "kind", None)


ExtractionConfig = Annotated[
    Union[Annotated[LabelConfig, Tag("label")], Annotated[RowConfig, Tag("row")]],
    Discriminator(_config_kind),
]


class ExtractionRequest(BaseModel):
    config: ExtractionConfig
    document: Document


class ExtractionResponse(BaseModel):
    """Envelope for a single anchor extraction."""

    success: bool = Field(..., description="True when a line was resolved.")
    line: Line | None = Field(default=None, description="The resolved line, if any.")
    message: str = Field(..., description="Human-readable status message.")


class TemplateField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    required: bool = True
    rule: ExtractionConfig


class ExtractionTemplate(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    fields: list[TemplateField] = Field(default_factory=list)

    @field_validator("fields")
    @classmethod
    def _unique_field_names(cls, value: list[TemplateField]) -> list[TemplateField]:
        seen: set[str] = set()
        for field in value:
            if field.name in seen:
                raise ValueError(f"Duplicate template field name: {field.name}")
            seen.add(field.name)
        return value


class TemplateExtractionResponse(BaseModel):
    """Envelope for template-driven extraction results."""

    success: bool
    template_name: str
    data: dict[str, str | None] = Field(default_factory=dict)
    errors: list[str] = Field(default_factory=list)
    message: str
