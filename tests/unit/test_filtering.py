"""FilterEngine query building and pagination envelope."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from distributor_mgmt.core.filtering import FilterEngine, FilterOp, FilterRequest, criteria_of
from distributor_mgmt.core.pagination import PaginationRequest, PaginationResponse, SortOrder
from distributor_mgmt.domain.distributor import Distributor
from distributor_mgmt.domain.enums import TermsStatus
from distributor_mgmt.repositories.distributor import DistributorRepository
from distributor_mgmt.schemas.distributor import DistributorFilter
from distributor_mgmt.schemas.terms import DistributorTermsFilter


@pytest.fixture
def engine():
    return FilterEngine(None, Distributor, lambda row: row, DistributorRepository.filter_fields)


def _sql(clause) -> str:
    return str(clause.compile(compile_kwargs={"literal_binds": True}))


# ---------------------------------------------------------------------------
# criteria_of
# ---------------------------------------------------------------------------

def test_criteria_of_drops_nulls():
    assert criteria_of(DistributorFilter(name="Acme", city=None)) == {"name": "Acme"}


def test_criteria_of_accepts_camel_case_mapping():
    assert criteria_of({"countryId": "MX", "isActive": None}) == {"country_id": "MX"}


def test_criteria_of_unwraps_enums():
    assert criteria_of(DistributorTermsFilter(status=TermsStatus.SIGNED)) == {"status": "SIGNED"}


def test_criteria_of_none_is_empty():
    assert criteria_of(None) == {}


# ---------------------------------------------------------------------------
# predicates
# ---------------------------------------------------------------------------

def test_empty_criteria_has_no_predicates(engine):
    assert engine.predicates({}) == []


def test_eq_predicate(engine):
    (clause,) = engine.predicates({"country_id": "MX"})
    assert _sql(clause) == "distributor.country_id = 'MX'"


def test_prefix_predicate_is_case_insensitive(engine):
    (clause,) = engine.predicates({"name": "acm"})
    sql = str(clause).lower()
    assert "lower(distributor.name)" in sql
    assert "like" in sql


def test_range_predicate_emits_each_given_bound(engine):
    start, end = datetime(2025, 1, 1), datetime(2025, 12, 31)
    assert len(engine.predicates({"created_at": {"gte": start, "lte": end}})) == 2
    assert len(engine.predicates({"created_at": {"gte": start}})) == 1
    assert engine.predicates({"created_at": {"gte": None, "lte": None}}) == []


def test_fields_outside_allow_list_are_ignored(engine):
    # tax_id is allow-listed; phone_number is a column but not filterable
    assert len(engine.predicates({"tax_id": "X1", "phone_number": "555"})) == 1
    assert engine.predicates({"no_such_column": "x"}) == []


def test_scope_is_applied_before_criteria(engine):
    sql = _sql(engine.query({"is_active": True}, {"country_id": "MX"}).whereclause)
    assert "distributor.country_id = 'MX'" in sql
    assert "distributor.is_active" in sql


# ---------------------------------------------------------------------------
# order_by
# ---------------------------------------------------------------------------

def test_default_sort_with_id_tie_breaker(engine):
    clauses = [_sql(c) for c in engine.order_by([])]
    assert clauses == ["distributor.created_at DESC", "distributor.id ASC"]


def test_requested_sort_accepts_camel_case(engine):
    clauses = [_sql(c) for c in engine.order_by([SortOrder(field="displayName", direction="DESC")])]
    assert clauses == ["distributor.display_name DESC", "distributor.id ASC"]


def test_unknown_sort_fields_fall_back_to_default(engine):
    clauses = [_sql(c) for c in engine.order_by([SortOrder(field="bogus")])]
    assert clauses[0] == "distributor.created_at DESC"


def test_custom_default_sort():
    engine = FilterEngine(None, Distributor, lambda r: r, {"name": FilterOp.PREFIX}, (("name", "asc"),))
    assert [_sql(c) for c in engine.order_by([])] == ["distributor.name ASC", "distributor.id ASC"]


# ---------------------------------------------------------------------------
# Pagination models
# ---------------------------------------------------------------------------

def test_request_defaults():
    request = FilterRequest[DistributorFilter].model_validate({})
    assert request.filters is None
    assert request.pagination.page_number == 0
    assert request.pagination.page_size == 20


def test_request_parses_camel_case():
    request = FilterRequest[DistributorFilter].model_validate(
        {"filters": {"countryId": "MX"}, "pagination": {"pageNumber": 2, "pageSize": 5}}
    )
    assert request.filters.country_id == "MX"
    assert request.pagination.offset == 10


@pytest.mark.parametrize("page", [{"pageNumber": -1}, {"pageSize": 0}, {"pageSize": 201}])
def test_request_rejects_invalid_pages(page):
    with pytest.raises(ValidationError):
        PaginationRequest.model_validate(page)


def test_sort_direction_is_validated():
    with pytest.raises(ValidationError):
        SortOrder(field="name", direction="sideways")


@pytest.mark.parametrize(
    "total,size,pages",
    [(0, 20, 0), (1, 20, 1), (20, 20, 1), (41, 20, 3)],
)
def test_response_total_pages(total, size, pages):
    page = PaginationResponse.of([], total, 0, size)
    assert page.total_pages == pages
    assert page.model_dump(by_alias=True)["totalElements"] == total
