import logging

from apps.core.exceptions import NotFoundOrUnauthorized, StoreMismatch
from apps.sales.models import PaymentMethod

logger = logging.getLogger(__name__)


class PaymentMethodService:

    @staticmethod
    def delete_payment_method(store, method_id) -> None:
        """
        404 when the method does not exist at all, 403 when it exists but
        belongs to another store.
        """
        method = PaymentMethod.objects.filter(pk=method_id).first()
        if method is None:
            raise NotFoundOrUnauthorized('Payment method not found')

        if method.store_id != store.id:
            logger.warning(
                f"Refusing to delete payment method {method_id}: owned by store "
                f"{method.store_id}, requested by {store.id}"
            )
            raise StoreMismatch('Unauthorized')

        method.delete()
        logger.info(f"Payment method deleted: {method.name} ({method_id}) store={store.id}")
