# 📄 File: subscription_lifecycle/modules/subscription_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# Describes how subscriptions are laid out as a table in the database.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the subscription table, including the (user_id, name)
# uniqueness rule and the provider/status check constraints.
# 🔗 Dependencies:
# SQLAlchemy, subscription_lifecycle.shared.config.database (DatabaseBase)
# 🔄 Connected Modules / Calls From:
# SqlAlchemySubscriptionRepository, DatabaseSessionManager.create_tables

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, String, UniqueConstraint

from subscription_lifecycle.shared.config.database import DatabaseBase


class SubscriptionModel(DatabaseBase):
    """
    SQLAlchemy model for subscription records.

    A user may hold several subscriptions, but never two with the same name.
    """
    __tablename__ = "subscription"
    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_subscription_user_id_name"),
        CheckConstraint("provider IN ('GOOGLE', 'APPLE')", name="provider"),
        CheckConstraint("status IN ('ACTIVE', 'CANCELED', 'EXPIRED')", name="status"),
    )

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Storage-assigned subscription identifier"
    )
    user_id = Column(
        Integer,
        nullable=False,
        index=True,
        comment="Owning user identifier"
    )
    name = Column(
        String(128),
        nullable=False,
        comment="Subscription display name"
    )
    provider = Column(
        String(32),
        nullable=False,
        comment="GOOGLE/APPLE"
    )
    expiration_date = Column(
        DateTime(timezone=True),
        nullable=False,
        comment="Expiration instant (UTC)"
    )
    status = Column(
        String(32),
        nullable=False,
        default="ACTIVE",
        comment="ACTIVE/CANCELED/EXPIRED"
    )

    def __repr__(self) -> str:
        return f"<SubscriptionModel(id={self.id}, user_id={self.user_id}, status={self.status})>"


__all__ = [
    "SubscriptionModel",
]
