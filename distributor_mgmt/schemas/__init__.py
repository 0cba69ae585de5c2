"""Pydantic schemas package.

Folder intent:
  common.py        — CamelModel base, AuditedOut, HealthResponse (all schemas inherit CamelModel)
  distributor.py   — distributor, branding, operations, simulations
  agency.py        — agencies, agents, agent/agency assignments, payment methods
  product.py       — product categories, lending types, products, lending configurations
  contract.py      — leasing and lending contracts, shipments
  commercial.py    — authorized territories, distributor contracts, product catalog
  terms.py         — terms templates, distributor terms, generation requests
  audit.py         — distributor audit log

Each entity follows the same shape: XCreate (POST body), XUpdate (PUT body,
full replacement plus optional lockVersion), XOut (response) and XFilter
(the criteria accepted by POST /filter).
"""
