# 📄 File: subscription_lifecycle/modules/subscription_management/application/mappers/create_subscription_mapper.py
# 🧭 Purpose (Layman Explanation):
# Turns an already-checked subscription request into a brand-new active subscription record.
# 🧪 Purpose (Technical Summary):
# Pure DTO -> domain mapper. Assumes CreateSubscriptionValidator accepted the input;
# resolves the provider token, fixes status to ACTIVE and leaves the ID for storage to assign.
# 🔗 Dependencies:
# CreateSubscriptionDTO, Subscription domain model
# 🔄 Connected Modules / Calls From:
# SubscriptionService.upsert, composition root

from subscription_lifecycle.modules.subscription_management.application.dto.subscription_dto import CreateSubscriptionDTO
from subscription_lifecycle.modules.subscription_management.domain.models.subscription import (
    Provider,
    Subscription,
    SubscriptionStatus,
)


class CreateSubscriptionMapper:

    def map(self, dto: CreateSubscriptionDTO) -> Subscription:
        return Subscription(
            user_id=dto.user_id,
            name=dto.name,
            provider=Provider.get_by_name(dto.provider),
            expiration_date=dto.expiration_date,
            status=SubscriptionStatus.ACTIVE,
        )
