from app.models.clinic import Clinic
from app.schemas.clinic import ClinicFilters
from app.services.clinic_filters import apply_client_filters, build_server_filter, has_client_filters
from tests.fakes import clinic_document


def make(doc_id, **overrides):
    return Clinic.model_validate({**clinic_document(**overrides), "id": doc_id})


def conditions(flt):
    return [(f.field_path, f.op_string, f.value) for f in flt.filters]


def test_server_filter_defaults_to_published():
    assert conditions(build_server_filter(None)) == [("status", "==", "published")]


def test_server_filter_with_country_and_rating():
    flt = build_server_filter(ClinicFilters(countries=["ES", "PT"], min_rating=4))
    assert conditions(flt) == [
        ("status", "==", "published"),
        ("address.country", "in", ["ES", "PT"]),
        ("rating", ">=", 4),
    ]


def test_zero_rating_is_not_a_condition():
    assert len(build_server_filter(ClinicFilters(min_rating=0)).filters) == 1


def test_client_filters_detection():
    assert not has_client_filters(None)
    assert not has_client_filters(ClinicFilters(countries=["ES"], min_rating=3))
    assert has_client_filters(ClinicFilters(city="mad"))
    assert has_client_filters(ClinicFilters(min_price=0))


def test_services_must_all_be_present():
    clinics = [make("a", services=["xray", "cleaning"]), make("b", services=["xray"])]
    result = apply_client_filters(clinics, ClinicFilters(services=["xray", "cleaning"]))
    assert [c.id for c in result] == ["a"]


def test_city_is_case_insensitive_substring():
    madrid = make("a")
    barcelona = make("b", address={**clinic_document()["address"], "city": "Barcelona"})
    result = apply_client_filters([madrid, barcelona], ClinicFilters(city="MAD"))
    assert [c.id for c in result] == ["a"]


def test_region_is_exact():
    md = make("a")
    ct = make("b", address={**clinic_document()["address"], "region": "CT"})
    assert [c.id for c in apply_client_filters([md, ct], ClinicFilters(region="CT"))] == ["b"]


def test_price_bounds():
    cheap = make("a", priceRange={"min": 10, "max": 100, "currency": "€"})
    pricey = make("b", priceRange={"min": 200, "max": 900, "currency": "€"})
    assert [c.id for c in apply_client_filters([cheap, pricey], ClinicFilters(min_price=50))] == ["b"]
    assert [c.id for c in apply_client_filters([cheap, pricey], ClinicFilters(max_price=500))] == ["a"]


def test_order_is_preserved():
    clinics = [make(str(i), rating=r) for i, r in enumerate([9, 7, 5])]
    result = apply_client_filters(clinics, ClinicFilters(services=["xray"]))
    assert [c.rating for c in result] == [9, 7, 5]
