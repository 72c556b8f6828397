from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Tier = Literal["BASIC", "STANDARD", "PREMIUM"]

MonetizationStatus = Literal["NOT_EARNING", "ALREADY_EARNING"]

# Legacy directory statuses that all mean "no ride revenue yet"
_NOT_EARNING_ALIASES = {"LOSING_MONEY", "NOT_ACTIVATED", "NOT_EARNING"}


class PropertyRecord(BaseModel):
    """
    Immutable base facts for one hotel, as read from the property directory.

    Currency is whole US dollars throughout.
    """
    model_config = ConfigDict(frozen=True)

    identifier: str
    name: str
    address: str = ""
    city: str = ""
    chain_code: str = ""
    chain_name: str = ""

    tier: Tier = "BASIC"
    monetization_status: MonetizationStatus = "NOT_EARNING"

    monthly_potential: int = Field(0, ge=0, description="Monthly ride revenue available if activated")
    monthly_revenue: int = Field(0, ge=0, description="Monthly ride revenue already earned")
    missed_bookings: int = Field(0, ge=0)

    competitor_identifiers: tuple[str, ...] = ()
    seed_complaints: tuple[str, ...] = ()

    @field_validator("monetization_status", mode="before")
    @classmethod
    def _normalize_status(cls, v):
        s = str(v).strip().upper()
        if s in _NOT_EARNING_ALIASES:
            return "NOT_EARNING"
        return s

    @field_validator("tier", mode="before")
    @classmethod
    def _normalize_tier(cls, v):
        return str(v).strip().upper()

    @model_validator(mode="before")
    @classmethod
    def _revenue_only_when_earning(cls, data):
        # monthly_revenue is meaningless for a property that is not earning yet
        if isinstance(data, dict):
            status = str(data.get("monetization_status", "NOT_EARNING")).strip().upper()
            if status != "ALREADY_EARNING":
                data = {**data, "monthly_revenue": 0}
        return data

    @property
    def is_earning(self) -> bool:
        return self.monetization_status == "ALREADY_EARNING"

    @property
    def monthly_figure(self) -> int:
        """The monthly amount the snapshot is framed around (earned or lost)."""
        return self.monthly_revenue if self.is_earning else self.monthly_potential
