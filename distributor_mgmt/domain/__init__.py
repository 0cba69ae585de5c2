"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  distributor.py  — Distributor, branding, operations, simulations
  agency.py       — agencies, agents, agent/agency assignments, agency payment methods
  product.py      — product categories, lending types, products, lending configurations
  contract.py     — leasing and lending contracts, shipments
  commercial.py   — authorized territories, distributor contracts, product catalog
  terms.py        — terms-and-conditions templates and distributor terms
  audit.py        — distributor audit log (written once, never updated by the middleware)
  enums.py        — enumerations shared with the API schemas
  mixins.py       — IdMixin, AuditMixin
"""

from distributor_mgmt.domain.agency import (
    AgencyPaymentMethod,
    DistributorAgency,
    DistributorAgent,
    DistributorAgentAgency,
)
from distributor_mgmt.domain.audit import DistributorAuditLog
from distributor_mgmt.domain.commercial import (
    DistributorAuthorizedTerritory,
    DistributorContract,
    DistributorProductCatalog,
)
from distributor_mgmt.domain.contract import LeasingContract, LendingContract, Shipment
from distributor_mgmt.domain.distributor import (
    Distributor,
    DistributorBranding,
    DistributorOperation,
    DistributorSimulation,
)
from distributor_mgmt.domain.product import (
    LendingConfiguration,
    LendingType,
    Product,
    ProductCategory,
)
from distributor_mgmt.domain.terms import (
    DistributorTermsAndConditions,
    TermsAndConditionsTemplate,
)

__all__ = [
    "AgencyPaymentMethod",
    "Distributor",
    "DistributorAgency",
    "DistributorAgent",
    "DistributorAgentAgency",
    "DistributorAuditLog",
    "DistributorAuthorizedTerritory",
    "DistributorBranding",
    "DistributorContract",
    "DistributorOperation",
    "DistributorProductCatalog",
    "DistributorSimulation",
    "DistributorTermsAndConditions",
    "LeasingContract",
    "LendingConfiguration",
    "LendingContract",
    "LendingType",
    "Product",
    "ProductCategory",
    "Shipment",
    "TermsAndConditionsTemplate",
]
