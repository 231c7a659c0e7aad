"""Order submission: turns the cart into one order document."""

from __future__ import annotations

import logging

from storefront.cart import Cart
from storefront.errors import SubmissionError, ValidationError
from storefront.models import OrderRecord
from storefront.observers import Subject
from storefront.store import RemoteStore

logger = logging.getLogger(__name__)

SUBMISSION_FAILED_MESSAGE = "Failed to place order. Please try again."


def build_order_record(cart: Cart) -> OrderRecord:
    """Snapshot the cart into an order record with the initial status."""
    return OrderRecord(
        shop_id=cart.shop_id,
        shop_name=cart.shop_name,
        items=cart.items,
        total_price=cart.total_price,
    )


class OrderSubmitter(Subject[bool]):
    """
    Places orders against the remote store.

    `submitting` is True while a write is in flight; subscribers receive the
    new value on each change so they can disable the submit control.
    """

    def __init__(self, store: RemoteStore) -> None:
        super().__init__()
        self.store = store
        self._submitting = False

    @property
    def submitting(self) -> bool:
        return self._submitting

    async def place_order(self, cart: Cart) -> str:
        """
        Write the cart as a new order and clear it.

        Returns the id of the created order document. Raises `ValidationError`
        for an empty cart or while another submission is in flight, and
        `SubmissionError` if the write fails; in both cases the cart is left
        unchanged.
        """
        logger.info("place_order_enter rows=%d shop_id=%r", len(cart), cart.shop_id)
        if cart.is_empty:
            logger.info("place_order_blocked reason=empty_cart")
            raise ValidationError("Cart is empty")
        if self._submitting:
            logger.info("place_order_blocked reason=in_flight")
            raise ValidationError("An order is already being placed")

        try:
            self._set_submitting(True)
            record = build_order_record(cart)
            logger.debug("place_order_write record=%r", record)
            try:
                order_id = await self.store.add_order(record)
            except Exception as exc:
                logger.exception("place_order_failed error_type=%s", type(exc).__name__)
                raise SubmissionError(SUBMISSION_FAILED_MESSAGE) from exc

            cart.clear()
            logger.info("place_order_done order_id=%s total=%d", order_id, record.total_price)
            return order_id
        finally:
            self._set_submitting(False)

    def _set_submitting(self, value: bool) -> None:
        self._submitting = value
        self._notify(value)
