"""Basic usage examples for the Rentdesk Python client."""

import asyncio
import logging

from rentdesk import (
    ApiError,
    BackendClient,
    BackendConnectionError,
    ClientConfig,
    Identity,
    LandlordAPI,
    StaticIdentityProvider,
)


async def probe_example(config: ClientConfig):
    """Check the backend is reachable before signing in."""
    async with BackendClient(config, StaticIdentityProvider()) as client:
        try:
            status = await client.test_connection()
            print(f"Backend status: {status}")
        except BackendConnectionError as e:
            print(e)
            return

        try:
            health = await client.health_check()
            print(f"Backend health: {health}")
        except ApiError as e:
            print(f"Health check failed with {e.status_code}: {e.payload}")


async def landlord_example(config: ClientConfig):
    """Signed-in landlord calls."""
    provider = StaticIdentityProvider()
    provider.sign_in(Identity(uid="uid_landlord_1", email="landlord@example.com"), "your-id-token")

    async with BackendClient(config, provider) as client:
        landlord = LandlordAPI(client)

        properties = await landlord.get_properties()
        print(f"Properties: {properties}")

        tenant = await landlord.create_tenant({"name": "Jane Wanjiku", "unit": "A1", "rentAmount": 15000})
        print(f"Created tenant: {tenant}")

        await landlord.send_rent_reminder(tenant["id"], "Rent is due on the 5th")

        analytics = await landlord.get_analytics(period="month")
        print(f"Analytics: {analytics}")


async def main():
    logging.basicConfig(level=logging.INFO)
    # reads RENTDESK_API_BASE_URL, e.g. http://localhost:5000/api
    config = ClientConfig.from_env()

    print("=== Probes ===")
    await probe_example(config)

    print("\n=== Landlord ===")
    await landlord_example(config)


if __name__ == "__main__":
    asyncio.run(main())
