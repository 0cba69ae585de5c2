"""Routers package — HTTP endpoint definitions, versioned under /api/v1.

v1/:
  crud.py          — register_crud_routes(): create, /filter, get, update, delete
  deps.py          — acting user and parent-scope dependencies
  distributors.py  — distributors, branding, operations, simulations
  agencies.py      — agencies, agents, agent assignments, payment methods
  products.py      — categories, lending types, products, lending configurations
  contracts.py     — leasing contracts and shipments
  terms.py         — terms templates, distributor terms, generation
  audit_logs.py    — distributor audit log

Routers translate HTTP to service calls and nothing else.
"""
