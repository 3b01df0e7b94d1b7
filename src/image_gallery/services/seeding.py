"""One-time import of the image catalog from the photo source."""

import asyncio
import logging
from dataclasses import dataclass

from starlette.concurrency import run_in_threadpool

from image_gallery.adapters.picsum_client import PicsumClient
from image_gallery.domain.images import SeedReport
from image_gallery.services.gallery import ImageRepository

logger = logging.getLogger(__name__)


@dataclass
class CatalogSeeder:
    """Populates an empty catalog from the external photo listing."""

    client: PicsumClient
    repository: ImageRepository
    limit: int = 100
    attempts: int = 3
    retry_delay_seconds: float = 5.0

    async def seed(self, resume: bool = False) -> SeedReport:
        """Seed the catalog if it is empty.

        With resume set the empty-catalog guard is skipped and only images
        missing from the catalog are inserted, completing a partial run.
        """
        logger.info("Syncing images")
        if not resume and await run_in_threadpool(self.repository.count) > 0:
            logger.info("Images already synced")
            return SeedReport(already_seeded=True)

        entries = await self.client.list_photos(limit=self.limit)
        inserted = 0
        skipped = 0
        for entry in entries:
            image = self.client.to_image(entry)
            existing = await run_in_threadpool(self.repository.get, image.external_id)
            if existing is not None:
                logger.debug("Image %s already exists", image.external_id)
                skipped += 1
                continue
            await run_in_threadpool(self.repository.insert, image)
            inserted += 1
        logger.info("Synced %d images (%d skipped)", inserted, skipped)
        return SeedReport(fetched=len(entries), inserted=inserted, skipped=skipped)

    async def seed_with_retry(self) -> SeedReport | None:
        """Run seed, retrying failures; a final failure is logged, not raised."""
        for attempt in range(1, self.attempts + 1):
            try:
                return await self.seed(resume=attempt > 1)
            except Exception:
                logger.exception(
                    "Error syncing images",
                    extra={"attempt": attempt, "attempts": self.attempts},
                )
            if attempt < self.attempts:
                await asyncio.sleep(self.retry_delay_seconds)
        logger.error("Giving up on image sync; catalog may be empty")
        return None
