"""Services package — all business logic lives here, never in routers.

Files:
  base.py              — EntityService: the create/get/update/delete/filter lifecycle every entity shares
  distributor.py       — distributors, branding, operations (can_operate), simulations
  agency.py            — agencies, agents, agent assignments, payment methods (single primary)
  product.py           — categories, lending types, products, lending configurations
  contract.py          — leasing and lending contracts (approve opens a shipment) and shipments
  commercial.py        — authorized territories, distributor contracts, product catalog
  terms.py             — terms templates and distributor terms (sign, status)
  terms_generation.py  — template rendering, variable validation, renewal
  audit.py             — distributor audit log

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
