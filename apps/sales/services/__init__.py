from .payment_methods import PaymentMethodService
from .sales import SaleService

__all__ = [
    'PaymentMethodService',
    'SaleService',
]
