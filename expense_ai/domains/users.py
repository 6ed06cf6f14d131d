"""
User domain models.

IdentityUser mirrors the identity provider's session user, ApplicationUser is
the record this application keeps for it.
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field


class EmailAddress(BaseModel):
    """An email address attached to an identity."""
    id: Optional[str] = None
    email_address: str


class IdentityUser(BaseModel):
    """The authenticated user behind the current session."""
    id: str = Field(..., description="Identity provider user id")
    email_addresses: List[EmailAddress] = Field(default_factory=list)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    image_url: str = ""

    @property
    def primary_email(self) -> str:
        if not self.email_addresses:
            return ""
        return self.email_addresses[0].email_address

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class ApplicationUser(BaseModel):
    """Application-level user, keyed by the external identity id."""
    id: str = Field("", description="Document identifier")
    external_id: str = Field(..., description="Identity provider user id")
    email: str = Field(..., description="Primary email address")
    name: str = Field("", description="Display name")
    image_url: str = Field("", description="Avatar image URL")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the record was created",
    )

    @classmethod
    def from_identity(cls, identity: IdentityUser) -> "ApplicationUser":
        return cls(
            external_id=identity.id,
            email=identity.primary_email,
            name=identity.full_name,
            image_url=identity.image_url,
        )
