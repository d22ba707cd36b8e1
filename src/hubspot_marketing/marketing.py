"""
Marketing service registry.
"""

from .services import FormService, MarketingEmailService, TransactionalService


class Marketing:
    """
    Groups the Marketing API services behind one object.

    Each service is built independently against the same client and holds
    its own resource path.
    """

    def __init__(self, client):
        self.email = MarketingEmailService(client)
        self.transactional = TransactionalService(client)
        self.form = FormService(client)
