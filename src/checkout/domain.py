"""Checkout bounded context — cart documents, the published catalog, and checkout resolution.

Carts and catalog products are stored as protean aggregates. The resolution
pipeline in ``checkout.resolution`` is a pure transform over those documents
and never reads the current domain itself.
"""

import structlog
from protean.domain import Domain

checkout = Domain(name="checkout")

logger = structlog.get_logger(__name__)
