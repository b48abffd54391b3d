from app.services import countries


def test_lookup_by_code():
    spain = countries.get_country("ES")
    assert spain.name == "Spain"
    assert spain.slug == "spain"
    assert countries.get_country_name("ES") == "Spain"
    assert countries.get_country_slug("ES") == "spain"


def test_unknown_code_fallbacks():
    assert countries.get_country("ZZ") is None
    assert countries.get_country_name("ZZ") == "ZZ"
    assert countries.get_country_slug("ZZ") == "zz"
    assert not countries.is_valid_country_code("ZZ")


def test_reverse_slug_lookup():
    assert countries.get_country_code_by_slug("united-states") == "US"
    assert countries.get_country_by_slug("germany").code == "DE"
    assert countries.get_country_by_slug("atlantis") is None


def test_regions():
    assert countries.has_regions("ES")
    assert not countries.has_regions("GB")
    assert countries.get_regions("GB") is None
    assert countries.get_region_name("ES", "CT") == "Catalonia"
    assert countries.get_region_slug("ES", "MD") == "madrid"
    assert countries.get_region_name("ES", "XX") is None
    assert countries.get_region_by_slug("US", "new-york") == {"code": "NY", "name": "New York"}
    assert countries.get_region_by_slug("US", "narnia") is None
    assert countries.get_region_by_slug("GB", "london") is None


def test_flag_url():
    assert countries.get_country_flag("FR") == "https://flagcdn.com/fr.svg"


def test_legacy_tables_match_countries():
    all_countries = countries.get_all_countries()
    assert len(countries.COUNTRIES) == len(all_countries)
    assert countries.COUNTRIES["IT"] == "Italy"
    assert countries.REGIONS["MX"]["CMX"] == "Mexico City"
    assert "GB" not in countries.REGIONS


def test_slugs_are_unique():
    slugs = [c.slug for c in countries.get_all_countries()]
    assert len(slugs) == len(set(slugs))
