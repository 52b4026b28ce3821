"""Cart Schemas — request bodies for checkout routes.

Invariants:
    - Unknown body keys are tolerated (VTEX owns the item shape)
    - orderItems absent → None, so the route can answer its own 400
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class AddToCartRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    orderItems: list[Any] | None = None
