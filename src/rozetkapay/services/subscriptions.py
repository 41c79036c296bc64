"""Subscription plans and customer subscriptions."""

from typing import Any

from rozetkapay.models.subscriptions import (
    CancelSubscriptionRequest,
    CreateSubscriptionPlanRequest,
    CreateSubscriptionRequest,
    CreateSubscriptionResponse,
    CustomerSubscriptionsResponse,
    GiftSubscriptionRequest,
    SubscriptionPaymentsResponse,
    SubscriptionPlanResponse,
    SubscriptionPlansResponse,
    SubscriptionResponse,
    UpdateSubscriptionPlanRequest,
    UpdateSubscriptionRequest,
)
from rozetkapay.services.base import BaseService, path_segment


BASE_PATH = "/api/subscriptions/v1"


class SubscriptionService(BaseService):
    """Operations under /api/subscriptions/v1."""

    # === Plans ===

    async def get_plans(self) -> SubscriptionPlansResponse:
        return await self._get(f"{BASE_PATH}/plans", SubscriptionPlansResponse)

    async def create_plan(self, request: CreateSubscriptionPlanRequest) -> SubscriptionPlanResponse:
        return await self._post(f"{BASE_PATH}/plans", request, SubscriptionPlanResponse)

    async def get_plan(self, plan_id: str) -> SubscriptionPlanResponse:
        return await self._get(f"{BASE_PATH}/plans/{path_segment(plan_id)}", SubscriptionPlanResponse)

    async def update_plan(
        self, plan_id: str, request: UpdateSubscriptionPlanRequest
    ) -> SubscriptionPlanResponse:
        return await self._patch(
            f"{BASE_PATH}/plans/{path_segment(plan_id)}", request, SubscriptionPlanResponse
        )

    async def deactivate_plan(self, plan_id: str) -> dict[str, Any]:
        return await self._delete(f"{BASE_PATH}/plans/{path_segment(plan_id)}")

    # === Subscriptions ===

    async def create(self, request: CreateSubscriptionRequest) -> SubscriptionResponse:
        return await self._post(f"{BASE_PATH}/subscriptions", request, SubscriptionResponse)

    async def gift(self, request: GiftSubscriptionRequest) -> CreateSubscriptionResponse:
        """Grant a subscription to a customer without charging them."""
        return await self._post(
            f"{BASE_PATH}/subscriptions/gift", request, CreateSubscriptionResponse
        )

    async def get(self, subscription_id: str) -> SubscriptionResponse:
        return await self._get(
            f"{BASE_PATH}/subscriptions/{path_segment(subscription_id)}", SubscriptionResponse
        )

    async def update(
        self, subscription_id: str, request: UpdateSubscriptionRequest
    ) -> SubscriptionResponse:
        return await self._patch(
            f"{BASE_PATH}/subscriptions/{path_segment(subscription_id)}",
            request,
            SubscriptionResponse,
        )

    async def deactivate(self, subscription_id: str) -> dict[str, Any]:
        return await self._delete(f"{BASE_PATH}/subscriptions/{path_segment(subscription_id)}")

    async def cancel(
        self, subscription_id: str, request: CancelSubscriptionRequest
    ) -> dict[str, Any]:
        return await self._post(
            f"{BASE_PATH}/subscriptions/{path_segment(subscription_id)}/cancel", request
        )

    async def get_payments(self, subscription_id: str) -> SubscriptionPaymentsResponse:
        return await self._get(
            f"{BASE_PATH}/subscriptions/{path_segment(subscription_id)}/payments",
            SubscriptionPaymentsResponse,
        )

    async def get_customer_subscriptions(self, customer_id: str) -> CustomerSubscriptionsResponse:
        return await self._get(
            f"{BASE_PATH}/subscriptions/customer/{path_segment(customer_id)}",
            CustomerSubscriptionsResponse,
        )
