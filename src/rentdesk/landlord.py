"""Landlord-facing endpoints of the Rentdesk API."""

from typing import Any, Optional

from .client import BackendClient, response_payload


class LandlordAPI:
    """
    Property, tenant, payment and dashboard calls for the signed-in landlord.

    Every call goes through the client's pipeline, so failures surface as the
    same ``ApiError`` / ``TransportError`` the client raises.

    Usage:
        async with BackendClient(config, provider) as client:
            landlord = LandlordAPI(client)
            properties = await landlord.get_properties()
            tenants = await landlord.get_tenants(property_id="prop_1")
    """

    def __init__(self, client: BackendClient):
        self.client = client

    # Properties

    async def get_properties(self) -> Any:
        response = await self.client.get("/landlord/properties")
        return response_payload(response)

    async def create_property(self, property_data: dict[str, Any]) -> Any:
        response = await self.client.post("/landlord/properties", property_data)
        return response_payload(response)

    async def update_property(self, property_id: str, property_data: dict[str, Any]) -> Any:
        response = await self.client.put(f"/landlord/properties/{property_id}", property_data)
        return response_payload(response)

    async def delete_property(self, property_id: str) -> Any:
        response = await self.client.delete(f"/landlord/properties/{property_id}")
        return response_payload(response)

    # Tenants

    async def get_tenants(self, property_id: Optional[str] = None) -> Any:
        """
        List tenants, optionally only those of one property.

        Args:
            property_id: Restrict to this property

        Returns:
            Tenant list payload
        """
        params = {"propertyId": property_id} if property_id else None
        response = await self.client.get("/landlord/tenants", params=params)
        return response_payload(response)

    async def create_tenant(self, tenant_data: dict[str, Any]) -> Any:
        response = await self.client.post("/landlord/tenants", tenant_data)
        return response_payload(response)

    async def update_tenant(self, tenant_id: str, tenant_data: dict[str, Any]) -> Any:
        response = await self.client.put(f"/landlord/tenants/{tenant_id}", tenant_data)
        return response_payload(response)

    async def delete_tenant(self, tenant_id: str) -> Any:
        response = await self.client.delete(f"/landlord/tenants/{tenant_id}")
        return response_payload(response)

    # Payments

    async def get_payments(self, **filters: Any) -> Any:
        """
        List payments matching the given filters.

        Filters are sent as query parameters verbatim, e.g.
        ``get_payments(tenantId="t_1", status="completed")``.
        """
        response = await self.client.get("/payments", params=filters or None)
        return response_payload(response)

    async def get_payment_history(self, tenant_id: str) -> Any:
        response = await self.client.get(f"/payments/history/{tenant_id}")
        return response_payload(response)

    # Notifications

    async def send_rent_reminder(self, tenant_id: str, message: str) -> Any:
        response = await self.client.post(
            "/notifications/rent-reminder",
            {"tenantId": tenant_id, "message": message},
        )
        return response_payload(response)

    # Dashboard

    async def get_dashboard_data(self) -> Any:
        response = await self.client.get("/landlord/dashboard")
        return response_payload(response)

    async def get_analytics(self, period: str = "month") -> Any:
        response = await self.client.get("/landlord/analytics", params={"period": period})
        return response_payload(response)
