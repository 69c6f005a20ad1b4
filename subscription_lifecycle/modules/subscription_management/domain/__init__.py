"""
Subscription Management Domain Layer

- models: Subscription entity with Provider and SubscriptionStatus enums
- repositories: data-access contract the service depends on
- services: lifecycle orchestration (upsert, cancel, expire)
"""
