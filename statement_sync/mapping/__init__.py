"""Mapping layer package for transaction-to-page transformation boundaries."""

from .interfaces import ChannelLookupError, MappingPort
from .notion_properties import (
	NotionDatabaseParent,
	NotionDateProperty,
	NotionDateValue,
	NotionNumberProperty,
	NotionPageCreateRequest,
	NotionPropertyValue,
	NotionSelectOption,
	NotionSelectProperty,
	NotionTextContent,
	NotionTextProperty,
	NotionTitleProperty,
	TransactionPageProperties,
)
from .service import NotionRecordMapper

__all__ = [
	"ChannelLookupError",
	"MappingPort",
	"NotionDatabaseParent",
	"NotionDateProperty",
	"NotionDateValue",
	"NotionNumberProperty",
	"NotionPageCreateRequest",
	"NotionPropertyValue",
	"NotionRecordMapper",
	"NotionSelectOption",
	"NotionSelectProperty",
	"NotionTextContent",
	"NotionTextProperty",
	"NotionTitleProperty",
	"TransactionPageProperties",
]
