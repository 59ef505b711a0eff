"""Shared field types and the base model for ledger records."""

import math
import uuid
from datetime import datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate an opaque record identifier."""
    return str(uuid.uuid4())


def _lenient_number(value: Any) -> Any:
    """Treat blank, missing, unparsable or NaN numeric input as zero."""
    if value is None:
        return 0.0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0.0
    if isinstance(value, float) and math.isnan(value):
        return 0.0
    return value


def _lenient_text(value: Any) -> Any:
    return "" if value is None else value


def _to_local_naive(value: datetime) -> datetime:
    """Normalize aware timestamps to naive local time."""
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


LenientFloat = Annotated[float, BeforeValidator(_lenient_number)]
LenientStr = Annotated[str, BeforeValidator(_lenient_text)]
LocalDateTime = Annotated[datetime, AfterValidator(_to_local_naive)]


class LedgerModel(BaseModel):
    """
    Base for persisted ledger records.

    Accepts both the camelCase keys used by exported records and
    Python field names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_record(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON record shape."""
        return self.model_dump(mode="json", by_alias=True)
