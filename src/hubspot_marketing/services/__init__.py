"""
Resource services, one per API resource.
"""

from .emails import MarketingEmailService
from .forms import FormService
from .transactional import TransactionalService

__all__ = [
    "FormService",
    "MarketingEmailService",
    "TransactionalService",
]
