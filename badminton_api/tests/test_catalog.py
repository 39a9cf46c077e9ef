from sqlalchemy.orm import Session
from ..catalog.models import Product, ProductType, Brand, Racket
from .conftest import racket_payload, shoes_payload, shuttlecock_payload


def seed_rackets(client):
    payloads = [
        racket_payload("Astrox 88D", price=4800000, balance="HEAD_HEAVY", stiffness="STIFF", weight="4U"),
        racket_payload("Nanoflare 800", price=4320000, balance="HEAD_LIGHT", stiffness="STIFF", weight="4U"),
        racket_payload("Arcsaber 11", price=3600000, balance="EVEN", stiffness="MEDIUM", weight="3U"),
        racket_payload("Thruster K 9900", price=3120000, brand="VICTOR", balance="HEAD_HEAVY", stiffness="STIFF", weight="3U"),
        racket_payload("Axforce 80", price=2880000, brand="lining", balance="HEAD_HEAVY", stiffness="EXTRA_STIFF", weight="4U"),
        racket_payload("Auraspeed 90K", price=2640000, brand="VICTOR", balance="EVEN", stiffness="MEDIUM", weight="5U"),
    ]
    response = client.post("/rackets/bulk", json=payloads)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_racket_returns_display_price(client):
    response = client.post("/rackets", json=racket_payload("Astrox 99", price=240000))

    assert response.status_code == 201
    racket = response.json()
    assert racket["balance"] == "EVEN"
    assert racket["product"]["price"] == 10.0
    assert racket["product"]["product_type"] == "racket"


def test_price_is_stored_in_vnd(client, session_factory):
    client.post("/rackets", json=racket_payload("Astrox 99", price=250000))

    with session_factory() as session:
        product = session.query(Product).one()
        assert product.price == 250000
        assert product.product_type == ProductType.RACKET
        assert product.brand == Brand.YONEX


def test_get_racket_by_id(client):
    created = client.post("/rackets", json=racket_payload("Astrox 99", price=480000)).json()

    response = client.get(f"/rackets/{created['id']}")

    assert response.status_code == 200
    assert response.json()["product"]["product_name"] == "Astrox 99"
    assert response.json()["product"]["price"] == 20.0


def test_get_missing_racket_returns_not_found(client):
    response = client.get("/rackets/12345")
    assert response.status_code == 404
    assert response.json()["detail"] == "Racket not found"


def test_list_rackets_without_filters_returns_everything(client):
    seed_rackets(client)

    body = client.get("/rackets").json()

    assert body["total"] == 6
    assert len(body["data"]) == 6


def test_filter_rackets_by_balance(client):
    seed_rackets(client)

    body = client.get("/rackets", params={"balance": "HEAD_HEAVY,EVEN"}).json()

    assert body["total"] == 5
    assert len(body["data"]) == 5
    assert {r["balance"] for r in body["data"]} == {"HEAD_HEAVY", "EVEN"}


def test_paginate_filtered_rackets(client):
    seed_rackets(client)
    everything = client.get("/rackets", params={"balance": "HEAD_HEAVY,EVEN"}).json()["data"]

    body = client.get("/rackets", params={"balance": "HEAD_HEAVY,EVEN", "limit": 2, "page": 2}).json()

    assert body["total"] == 5
    assert [r["id"] for r in body["data"]] == [everything[2]["id"], everything[3]["id"]]


def test_page_defaults_to_first_page(client):
    seed_rackets(client)

    body = client.get("/rackets", params={"limit": 4}).json()

    assert body["total"] == 6
    assert len(body["data"]) == 4


def test_filter_rackets_by_brand_is_case_insensitive(client):
    seed_rackets(client)

    body = client.get("/rackets", params={"brand": "victor, LiNiNg"}).json()

    assert body["total"] == 3
    assert {r["product"]["brand"] for r in body["data"]} == {"VICTOR", "LINING"}


def test_create_racket_accepts_spaced_mixed_case_brand(client):
    response = client.post("/rackets", json=racket_payload("Axforce 100", brand=" Li Ning "))

    assert response.status_code == 201, response.text
    assert response.json()["product"]["brand"] == "LINING"

    body = client.get("/rackets", params={"brand": "Li Ning"}).json()
    assert body["total"] == 1
    assert body["data"][0]["product"]["product_name"] == "Axforce 100"


def test_filter_rackets_by_weight_and_stiffness(client):
    seed_rackets(client)

    body = client.get("/rackets", params={"weight": "4u", "stiffness": "STIFF"}).json()

    assert body["total"] == 2
    assert sorted(r["product"]["product_name"] for r in body["data"]) == ["Astrox 88D", "Nanoflare 800"]


def test_sort_rackets_by_price(client):
    seed_rackets(client)

    ascending = client.get("/rackets", params={"price": "asc"}).json()["data"]
    descending = client.get("/rackets", params={"price": "DESC"}).json()["data"]

    ascending_prices = [r["product"]["price"] for r in ascending]
    assert ascending_prices == sorted(ascending_prices)
    assert [r["id"] for r in descending] == [r["id"] for r in reversed(ascending)]
    assert ascending_prices[0] == 110.0


def test_invalid_racket_filters_are_rejected(client):
    assert client.get("/rackets", params={"balance": "TOP_HEAVY"}).status_code == 400
    assert client.get("/rackets", params={"brand": "ACME"}).status_code == 400
    assert client.get("/rackets", params={"limit": "ten"}).status_code == 400
    assert client.get("/rackets", params={"limit": 2, "page": 0}).status_code == 400


def test_bulk_create_is_all_or_nothing(client, session_factory):
    payloads = [
        racket_payload("Good Racket"),
        racket_payload("Bad Racket", balance="SIDEWAYS"),
    ]

    response = client.post("/rackets/bulk", json=payloads)

    assert response.status_code == 400
    with session_factory() as session:
        assert session.query(Product).count() == 0


def test_bulk_create_rolls_back_when_commit_fails(client, session_factory, monkeypatch):
    def failing_commit(self):
        # Các bản ghi đã được ghi xuống database trước khi commit lỗi
        self.flush()
        raise RuntimeError("connection lost during commit")

    monkeypatch.setattr(Session, "commit", failing_commit)

    response = client.post("/rackets/bulk", json=[racket_payload("First Racket"), racket_payload("Second Racket")])

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
    with session_factory() as session:
        assert session.query(Product).count() == 0
        assert session.query(Racket).count() == 0


def test_bulk_create_requires_an_array(client):
    response = client.post("/rackets/bulk", json=racket_payload("Lonely Racket"))
    assert response.status_code == 400


def seed_shoes(client):
    payloads = [
        shoes_payload("Power Cushion 65Z", size=[40, 41, 42], available_size=[41, 42]),
        shoes_payload("Eclipsion Z", brand="YONEX", size=[39, 40], available_size=[39]),
        shoes_payload("A970", size=["42.5", 43], available_size=["42.5"]),
    ]
    response = client.post("/shoes/bulk", json=payloads)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_shoes_keeps_size_lists(client):
    response = client.post("/shoes", json=shoes_payload("SH-A960", size=[40, 40.5, 41.0], available_size=["41"]))

    assert response.status_code == 201
    shoes = response.json()
    assert shoes["size"] == ["40", "40.5", "41"]
    assert shoes["available_size"] == ["41"]
    assert shoes["product"]["product_type"] == "shoes"


def test_filter_shoes_by_size_membership(client):
    seed_shoes(client)

    body = client.get("/shoes", params={"size": "40"}).json()

    assert body["total"] == 2
    assert sorted(s["product"]["product_name"] for s in body["data"]) == ["Eclipsion Z", "Power Cushion 65Z"]


def test_filter_shoes_by_available_size_and_brand(client):
    seed_shoes(client)

    body = client.get("/shoes", params={"available_size": "42, 42.5", "brand": "victor"}).json()

    assert body["total"] == 2
    assert sorted(s["product"]["product_name"] for s in body["data"]) == ["A970", "Power Cushion 65Z"]


def test_shoes_size_filter_counts_before_pagination(client):
    seed_shoes(client)

    body = client.get("/shoes", params={"size": "40,43", "limit": 1, "page": 2}).json()

    assert body["total"] == 3
    assert len(body["data"]) == 1


def test_shoe_sizes_longer_than_column_are_rejected(client, session_factory):
    response = client.post("/shoes", json=shoes_payload("Wide Fit", size=["EU 42 / US 9.5 wide"]))

    assert response.status_code == 400
    with session_factory() as session:
        assert session.query(Product).count() == 0

    assert client.get("/shoes", params={"size": "EU 42 / US 9.5 wide"}).status_code == 400


def test_get_missing_shoes_returns_not_found(client):
    assert client.get("/shoes/99").status_code == 404


def seed_shuttlecocks(client):
    payloads = [
        shuttlecock_payload("Aerosensa 50", speed=77),
        shuttlecock_payload("Aerosensa 30", speed=78),
        shuttlecock_payload("Mavis 350", shuttle_type="Nylon", speed=77),
        shuttlecock_payload("Master Ace", brand="VICTOR", shuttle_type="Goose Feather", speed=76),
    ]
    response = client.post("/shuttlecocks/bulk", json=payloads)
    assert response.status_code == 201, response.text
    return response.json()


def test_filter_shuttlecocks_by_speed(client):
    seed_shuttlecocks(client)

    body = client.get("/shuttlecocks", params={"speed": "76, 78"}).json()

    assert body["total"] == 2
    assert sorted(s["speed"] for s in body["data"]) == [76, 78]


def test_filter_shuttlecocks_by_type_substring(client):
    seed_shuttlecocks(client)

    body = client.get("/shuttlecocks", params={"shuttle_type": "feather"}).json()

    assert body["total"] == 3
    assert all("feather" in s["shuttle_type"].lower() for s in body["data"])


def test_non_numeric_speed_is_rejected(client):
    seed_shuttlecocks(client)

    response = client.get("/shuttlecocks", params={"speed": "fast"})

    assert response.status_code == 400


def test_get_shuttlecock_by_id(client):
    created = seed_shuttlecocks(client)

    response = client.get(f"/shuttlecocks/{created[0]['id']}")

    assert response.status_code == 200
    assert response.json()["product"]["price"] == 20.0
    assert response.json()["no_per_tube"] == 12


def test_products_listing_reports_product_type(client, session_factory):
    client.post("/rackets", json=racket_payload("Astrox 77"))
    client.post("/shoes", json=shoes_payload("Power Cushion Comfort"))
    client.post("/shuttlecocks", json=shuttlecock_payload("Aerosensa 20"))
    with session_factory() as session:
        session.add(Product(product_name="Grip Tape", price=48000, brand=Brand.OTHER))
        session.commit()

    body = client.get("/products").json()

    assert [p["product_type"] for p in body] == ["racket", "shoes", "shuttlecock", "unknown"]
    assert body[3]["price"] == 2.0
    assert set(body[0]) == {"id", "product_name", "image_url", "price", "product_type"}


def test_products_search_and_limit(client):
    client.post("/rackets", json=racket_payload("Astrox 77"))
    client.post("/rackets", json=racket_payload("Astrox 88S"))
    client.post("/shoes", json=shoes_payload("Power Cushion Comfort"))

    found = client.get("/products", params={"search": "astrox"}).json()
    limited = client.get("/products", params={"search": "ASTROX", "limit": 1}).json()

    assert [p["product_name"] for p in found] == ["Astrox 77", "Astrox 88S"]
    assert len(limited) == 1
