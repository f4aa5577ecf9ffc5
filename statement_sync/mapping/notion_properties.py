"""Notion page payload contracts built from statement transactions.

Each property value is one variant of a closed set tagged by its `type`
discriminant, which the Notion API consumes verbatim.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _NotionFrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NotionDateValue(_NotionFrozenModel):
    """Date range payload of a date property."""

    start: str
    end: str | None = None
    time_zone: str | None = None


class NotionDateProperty(_NotionFrozenModel):
    """Date property variant."""

    type: Literal["date"] = "date"
    date: NotionDateValue


class NotionNumberProperty(_NotionFrozenModel):
    """Number property variant."""

    type: Literal["number"] = "number"
    number: float


class NotionSelectOption(_NotionFrozenModel):
    """Reference to an existing select option by id."""

    id: str


class NotionSelectProperty(_NotionFrozenModel):
    """Select property variant."""

    type: Literal["select"] = "select"
    select: NotionSelectOption


class NotionTextContent(_NotionFrozenModel):
    """Content payload of a text rich-text item."""

    content: str
    link: str | None = None


class NotionTextProperty(_NotionFrozenModel):
    """Text rich-text variant used inside title properties."""

    type: Literal["text"] = "text"
    plain_text: str
    href: str | None = None
    text: NotionTextContent

    @classmethod
    def from_plain_text(cls, value: str) -> "NotionTextProperty":
        return cls(plain_text=value, text=NotionTextContent(content=value))


class NotionTitleProperty(_NotionFrozenModel):
    """Title property variant."""

    type: Literal["title"] = "title"
    title: tuple[NotionTextProperty, ...]

    @classmethod
    def from_plain_text(cls, value: str) -> "NotionTitleProperty":
        return cls(title=(NotionTextProperty.from_plain_text(value),))


NotionPropertyValue = Annotated[
    Union[
        NotionDateProperty,
        NotionNumberProperty,
        NotionSelectProperty,
        NotionTextProperty,
        NotionTitleProperty,
    ],
    Field(discriminator="type"),
]


class TransactionPageProperties(_NotionFrozenModel):
    """Fixed property set of one transaction page.

    Attributes:
        Date: Transaction date.
        Spent: Debited amount.
        Income: Credited amount.
        Mode: Payment channel select option.
        Description: Page title carrying the narration.
    """

    Date: NotionDateProperty
    Spent: NotionNumberProperty
    Income: NotionNumberProperty
    Mode: NotionSelectProperty
    Description: NotionTitleProperty


class NotionDatabaseParent(_NotionFrozenModel):
    """Parent reference pointing at the target database."""

    database_id: str


class NotionPageCreateRequest(_NotionFrozenModel):
    """Immutable page-creation request submitted to the Notion API.

    Attributes:
        parent: Target database reference.
        properties: Transaction page properties.
    """

    parent: NotionDatabaseParent
    properties: TransactionPageProperties

    def request_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible request body for `POST /pages`."""

        return self.model_dump(mode="json")
