"""v1 router package — all /api/v1/* endpoints live here.

Files:
  crud.py          — register_crud_routes(): the uniform create/filter/get/update/delete shape
  deps.py          — actor and parent-scope dependencies
  distributors.py  — distributors, branding, operations, simulations
  agencies.py      — agencies, agents, agent assignments, agency payment methods
  products.py      — product categories, lending types, products, lending configurations
  contracts.py     — leasing and lending contracts, shipments
  commercial.py    — authorized territories, distributor contracts, product catalog
  terms.py         — terms templates, distributor terms, generation
  audit_logs.py    — distributor audit log

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to distributor_mgmt/services/.
"""

from fastapi import APIRouter

from distributor_mgmt.routers.v1 import (
    agencies,
    audit_logs,
    commercial,
    contracts,
    distributors,
    products,
    terms,
)

ROUTERS: list[APIRouter] = [
    distributors.router,
    distributors.branding_router,
    distributors.operations_router,
    distributors.operations_lookup_router,
    distributors.simulations_router,
    distributors.simulations_lookup_router,
    commercial.territories_router,
    commercial.contracts_router,
    commercial.catalog_router,
    agencies.agencies_router,
    agencies.agents_router,
    agencies.assignments_router,
    agencies.payment_methods_router,
    products.categories_router,
    products.lending_types_router,
    products.products_router,
    products.configurations_router,
    products.lending_types_configurations_router,
    products.distributor_configurations_router,
    contracts.leasing_router,
    contracts.lending_router,
    contracts.shipments_router,
    terms.templates_router,
    terms.terms_router,
    audit_logs.router,
]
