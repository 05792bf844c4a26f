"""SQLite repository for lifestyle records."""

from ..schemas.lifestyle import LIFESTYLE_FIELDS, LifeStyle
from .base import SqliteRepository


class LifeStyleRepository(SqliteRepository[LifeStyle]):
    table = "lifestyles"
    id_column = "l_id"
    columns = LIFESTYLE_FIELDS
    model = LifeStyle
