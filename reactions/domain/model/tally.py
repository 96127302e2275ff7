"""Item tally entity."""

from datetime import datetime

from reactions.domain.model.common import DomainModel
from reactions.domain.value import ItemId, Tally


class ItemTally(DomainModel):
    """Counters of a single item, as listed on the admin dashboard."""

    item_id: ItemId
    tally: Tally
    updated_at: datetime
