from datetime import datetime

from pydantic import BaseModel, computed_field

_EPOCH = datetime(1970, 1, 1)


class DateConversion(BaseModel):
    """A piece of text together with the midnight it resolved to."""

    text: str
    resolved: datetime

    @computed_field  # type: ignore[prop-decorator]
    @property
    def iso_date(self) -> str:
        return self.resolved.date().isoformat()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days_since_epoch(self) -> int:
        return (self.resolved - _EPOCH).days
