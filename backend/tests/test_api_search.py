import pytest


@pytest.fixture
def listings(register, create_battery):
    owner = register("acme")
    tesla = create_battery(owner["id"], title="Powerwall", manufacturer="Tesla", capacity="10", price="7000",
                           category="residential", batteryType="used", location="Bavaria", country="DE")
    lg = create_battery(owner["id"], title="Grid block", manufacturer="LG Energy Solution", capacity="250",
                        price="150000", category="grid-scale", batteryType="new", listingType="rent",
                        rentalPeriod="monthly", location="Texas", country="US")
    return {"tesla": tesla, "lg": lg}


def result_ids(res):
    assert res.status_code == 200, res.text
    return [b["id"] for b in res.json()]


def test_manufacturer_search_is_case_insensitive_substring(client, listings):
    assert result_ids(client.get("/api/search?manufacturer=tesla")) == [listings["tesla"]["id"]]
    assert result_ids(client.get("/api/search?manufacturer=energy")) == [listings["lg"]["id"]]


def test_min_capacity_excludes_small_units(client, listings):
    assert result_ids(client.get("/api/search?minCapacity=50")) == [listings["lg"]["id"]]


def test_no_parameters_returns_all_newest_first(client, listings):
    assert result_ids(client.get("/api/search")) == [listings["lg"]["id"], listings["tesla"]["id"]]


def test_blank_parameters_are_ignored(client, listings):
    assert len(result_ids(client.get("/api/search?q=&type=&minPrice=&country="))) == 2


def test_combined_filters(client, listings):
    params = {"q": "grid", "type": "new", "listingType": "rent", "country": "US", "maxPrice": "150000"}
    assert result_ids(client.get("/api/search", params=params)) == [listings["lg"]["id"]]
    params["country"] = "DE"
    assert result_ids(client.get("/api/search", params=params)) == []


def test_inverted_range_is_empty_not_error(client, listings):
    assert result_ids(client.get("/api/search?minPrice=100000&maxPrice=10")) == []


@pytest.mark.parametrize(
    "query,field",
    [
        ("type=refurbished", "type"),
        ("category=toys", "category"),
        ("listingType=swap", "listingType"),
        ("minCapacity=big", "minCapacity"),
        ("maxPrice=NaN", "maxPrice"),
    ],
)
def test_invalid_parameters_are_rejected(client, listings, query, field):
    res = client.get(f"/api/search?{query}")
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Invalid search parameters"
    assert [err["field"] for err in body["errors"]] == [field]
