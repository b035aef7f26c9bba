"""Account model."""

from typing import Optional

from pydantic import Field

from .base import CamelModel


class Account(CamelModel):
    """A stored credential record.

    An empty ``id`` asks the backend to create a new record. Every other field
    is replaced wholesale by a save; ``last_login_time`` is only ever stamped
    by the backend.
    """

    id: str = ""
    email: str
    password: str
    email_password: str
    smtp_server: str
    smtp_port: int = Field(ge=1, le=65535)
    last_login_time: Optional[str] = None

    def __repr__(self):
        return f"<Account(id='{self.id}', email='{self.email}', last_login_time={self.last_login_time!r})>"
