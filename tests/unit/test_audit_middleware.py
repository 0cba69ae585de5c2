"""Which write requests produce a distributor audit row."""

import pytest

from distributor_mgmt.domain.enums import DistributorAction
from distributor_mgmt.middleware.audit import AuditTarget, _audit_target

DIST = "3f1c2a9e-8b7d-4c6e-9a1b-2d3e4f5a6b7c"
TERMS = "9a8b7c6d-5e4f-4a3b-8c2d-1e0f9a8b7c6d"


@pytest.mark.parametrize(
    "method,path,expected",
    [
        ("PUT", f"/api/v1/distributors/{DIST}", AuditTarget(DIST, DistributorAction.UPDATED, "distributor", DIST)),
        ("DELETE", f"/api/v1/distributors/{DIST}", AuditTarget(DIST, DistributorAction.TERMINATED, "distributor", DIST)),
        (
            "DELETE",
            f"/api/v1/distributors/{DIST}/terms-and-conditions/{TERMS}",
            AuditTarget(DIST, DistributorAction.UPDATED, "terms-and-conditions", TERMS),
        ),
        ("POST", "/api/v1/distributors", AuditTarget(None, DistributorAction.CREATED, "distributor", None)),
        ("POST", f"/api/v1/distributors/{DIST}/products", AuditTarget(DIST, DistributorAction.CREATED, "products", None)),
        (
            "POST",
            f"/api/v1/distributors/{DIST}/terms-and-conditions/{TERMS}/sign",
            AuditTarget(DIST, DistributorAction.UPDATED, "terms-and-conditions", TERMS),
        ),
        (
            "PATCH",
            f"/api/v1/distributors/{DIST}/terms-and-conditions/{TERMS}/status",
            AuditTarget(DIST, DistributorAction.UPDATED, "terms-and-conditions", TERMS),
        ),
    ],
)
def test_distributor_writes_are_audited(method, path, expected):
    assert _audit_target(path, method) == expected


@pytest.mark.parametrize(
    "method,path",
    [
        ("GET", f"/api/v1/distributors/{DIST}"),
        ("DELETE", "/api/v1/distributors"),
        ("POST", "/api/v1/distributors/filter"),
        ("POST", f"/api/v1/distributors/{DIST}/audit-logs"),
        ("POST", "/api/v1/product-categories"),
    ],
)
def test_other_requests_are_not_audited(method, path):
    assert _audit_target(path, method) is None
