"""Create database schema and seed the demo catalog for development."""
from __future__ import annotations

import asyncio

from app.data.listings import DEMO_LISTINGS
from app.db.session import SessionLocal, create_schema
from app.repositories import listings as listings_repo
from app.schemas.listing import Listing


async def seed_listings() -> None:
	"""Insert or overwrite the demo listings."""

	async with SessionLocal() as session:
		async with session.begin():
			for document in DEMO_LISTINGS:
				listing = Listing.model_validate(document)
				if not await listings_repo.replace(session, listing):
					await listings_repo.add(session, listing)


async def main() -> None:
	await create_schema()
	await seed_listings()
	print(f"Database schema ensured and {len(DEMO_LISTINGS)} demo listings seeded.")


if __name__ == "__main__":
	asyncio.run(main())
