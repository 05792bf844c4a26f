"""
Service layer for lifestyle records.

The service is a thin layer over :class:`LifeStyleRepository`.  It
checks that a record exists before updating or deleting it and
reports misses as :class:`RecordNotFound` results.  Updates replace
every attribute of the stored record except its identifier.
"""

import logging
from typing import List

from ..core.results import Result
from ..repositories.base import Repository
from ..schemas.lifestyle import LifeStyle, LifeStyleCreate

logger = logging.getLogger(__name__)


def _not_found_message(l_id: int) -> str:
    return f"LifeStyle not found with lID: {l_id}"


class LifeStyleService:
    """Business logic for lifestyle records."""

    def __init__(self, repository: Repository[LifeStyle]) -> None:
        self.repository = repository

    def get_all_lifestyles(self) -> List[LifeStyle]:
        return self.repository.list_all()

    def get_lifestyle_by_l_id(self, l_id: int) -> Result[LifeStyle]:
        lifestyle = self.repository.get_by_id(l_id)
        if lifestyle is None:
            logger.info("LifeStyle %s not found", l_id)
            return Result.not_found(_not_found_message(l_id))
        return Result.found(lifestyle)

    def get_lifestyles_by_patient_id_and_user_id(self, patient_id: int, user_id: int) -> List[LifeStyle]:
        return self.repository.find_by_patient_id_and_user_id(patient_id, user_id)

    def create_lifestyle(self, data: LifeStyleCreate) -> LifeStyle:
        """Persist a new record and return it with its assigned ``l_id``."""
        created = self.repository.save(LifeStyle(**data.model_dump()))
        logger.info("Created LifeStyle %s", created.l_id)
        return created

    def update_lifestyle(self, l_id: int, data: LifeStyleCreate) -> Result[LifeStyle]:
        """Replace the stored record ``l_id`` with ``data``."""
        updated = LifeStyle(l_id=l_id, **data.model_dump())
        if not self.repository.update(updated):
            logger.info("LifeStyle %s not found for update", l_id)
            return Result.not_found(_not_found_message(l_id))
        logger.info("Updated LifeStyle %s", l_id)
        return Result.found(updated)

    def delete_lifestyle(self, l_id: int) -> Result[None]:
        if not self.repository.exists_by_id(l_id):
            logger.info("LifeStyle %s not found for deletion", l_id)
            return Result.not_found(_not_found_message(l_id))
        self.repository.delete_by_id(l_id)
        logger.info("Deleted LifeStyle %s", l_id)
        return Result.found()
