"""Session, identity and role-specific profile models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from pyride.models._base import RideBaseModel
from pyride.models.booking import Coordinates


class Role(StrEnum):
    DRIVER = "driver"
    CLIENT = "client"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: Any) -> Role | None:
        """Return the matching role, or ``None`` for absent/unknown values."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class OnlineStatus(StrEnum):
    ONLINE = "online"
    OFFLINE = "offline"


class AdminRole(StrEnum):
    SUPER_ADMIN = "super_admin"
    MODERATOR = "moderator"


class Identity(RideBaseModel):
    """Handle returned by the external identity provider.

    Parameters
    ----------
    user_id : str
        Provider user id.
    email : str or None
        Sign-in email, when the provider exposes it.
    access_token : str or None
        Bearer token for API calls made on behalf of this user.
    user_metadata : dict
        Provider metadata; the ``role`` key carries the chosen role.
    """

    user_id: str = Field(validation_alias=AliasChoices("user_id", "id"))
    email: str | None = None
    access_token: str | None = Field(default=None, repr=False)
    user_metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def declared_role(self) -> Role | None:
        return Role.parse(self.user_metadata.get("role"))


class DriverProfile(RideBaseModel):
    id: str
    user_id: str
    full_name: str
    phone: str = ""
    email: str = ""
    license_no: str | None = None
    verified: bool = False
    hourly_rate: float = Field(default=0.0, ge=0)
    online_status: OnlineStatus = OnlineStatus.OFFLINE
    current_location: Coordinates | None = None
    rating: float = Field(default=0.0, ge=0, le=5)
    total_trips: int = Field(default=0, ge=0)
    profile_picture_url: str | None = None
    created_at: datetime | None = None


class ClientProfile(RideBaseModel):
    id: str
    user_id: str
    full_name: str
    email: str = ""
    phone: str = ""
    verified: bool = False
    profile_picture_url: str | None = None
    created_at: datetime | None = None


class AdminProfile(RideBaseModel):
    id: str
    user_id: str
    name: str
    email: str = ""
    # The API names this column ``role``; renamed to keep it apart from ``Role``.
    admin_role: AdminRole = Field(
        default=AdminRole.MODERATOR,
        validation_alias=AliasChoices("admin_role", "role"),
    )
    is_active: bool = True
    last_login: datetime | None = None
    created_at: datetime | None = None


Profile = DriverProfile | ClientProfile | AdminProfile

_PROFILE_MODELS: dict[Role, type[RideBaseModel]] = {
    Role.DRIVER: DriverProfile,
    Role.CLIENT: ClientProfile,
    Role.ADMIN: AdminProfile,
}


def parse_profile(role: Role, payload: dict[str, Any]) -> Profile:
    """Validate *payload* as the profile shape belonging to *role*."""
    model = _PROFILE_MODELS[role]
    profile: Profile = model.model_validate(payload)  # type: ignore[assignment]
    return profile


class IdentityCheckResult(BaseModel):
    """Resolved outcome of an identity check: who is signed in, and as what."""

    model_config = ConfigDict(frozen=True)

    identity: Identity
    role: Role | None = None
    profile: Profile | None = None

    @classmethod
    def from_identity(cls, identity: Identity) -> IdentityCheckResult:
        return cls(identity=identity, role=identity.declared_role)


class Session(BaseModel):
    """Snapshot held by :class:`pyride.state.session_store.SessionStore`.

    ``role`` and ``profile`` are only meaningful while ``identity`` is set.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    identity: Identity | None = None
    role: Role | None = None
    profile: Profile | None = None
    loading: bool = True

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None
