# 📄 File: subscription_lifecycle/modules/subscription_management/application/dto/subscription_dto.py
# 🧭 Purpose (Layman Explanation):
# Describes the raw "please create or update my subscription" request exactly as a caller sent it,
# before anything has been checked.
#
# 🧪 Purpose (Technical Summary):
# Transient input DTO for the upsert use case. Every field is optional so that missing values
# reach CreateSubscriptionValidator and are reported as coded errors instead of parse failures.
#
# 🔗 Dependencies:
# - pydantic for DTO structure and serialization
#
# 🔄 Connected Modules / Calls From:
# - CreateSubscriptionValidator (validation)
# - CreateSubscriptionMapper (conversion to the Subscription domain model)
# - SubscriptionService.upsert

"""
Subscription Data Transfer Objects (DTOs)

DTO Classes:
- CreateSubscriptionDTO: untrusted input for creating or replacing a user's subscription
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateSubscriptionDTO(BaseModel):
    """
    Input for SubscriptionService.upsert.

    The provider is a free-text token; it is matched against the
    Provider enum names by the validator, not here.
    """

    model_config = ConfigDict(frozen=True)

    user_id: Optional[int] = Field(None, description="Owning user identifier")
    name: Optional[str] = Field(None, description="Subscription display name")
    provider: Optional[str] = Field(None, description="Payment provider token, e.g. GOOGLE")
    expiration_date: Optional[datetime] = Field(None, description="Expiration instant")
