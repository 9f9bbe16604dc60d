"""
Schema-level behaviour: round trips, store defaults and the constraints the
database enforces on its own.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from storefront import models
from storefront.schemas.enums import PopularityEnum


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _assert_recent(value):
    assert value is not None
    assert abs(_utcnow() - value) < timedelta(minutes=1)


def test_user_round_trip(db_session):
    user = models.User(full_name="Ada Lovelace", phone="+44 20 7946 0000")
    db_session.add(user)
    db_session.commit()
    db_session.expire_all()

    loaded = db_session.get(models.User, user.id)
    assert loaded.id is not None
    assert loaded.full_name == "Ada Lovelace"
    assert loaded.phone == "+44 20 7946 0000"


def test_store_gets_created_at_but_no_updated_at(db_session, store):
    _assert_recent(store.created_at)
    assert store.updated_at is None
    assert store.user.full_name == "Store Owner"


def test_update_sets_updated_at(db_session, store):
    store.name = "Renamed"
    db_session.commit()
    db_session.refresh(store)
    _assert_recent(store.updated_at)


def test_product_defaults_and_relations(db_session, store):
    size = models.Size(store_id=store.id, name="Large", value="L")
    color = models.Color(store_id=store.id, name="Black", value="#000000")
    billboard = models.Billboard(store_id=store.id, label="Summer", image_url="https://cdn.example.com/s.png")
    db_session.add_all([size, color, billboard])
    db_session.flush()
    category = models.Category(store_id=store.id, billboard_id=billboard.id, name="Shirts")
    db_session.add(category)
    db_session.flush()

    product = models.Product(
        store_id=store.id,
        category_id=category.id,
        size_id=size.id,
        color_id=color.id,
        name="Oxford shirt",
        price=Decimal("12.5"),
        is_featured=True,
    )
    product.images = [models.Image(url="https://cdn.example.com/1.png")]
    db_session.add(product)
    db_session.commit()
    db_session.expire_all()

    loaded = db_session.get(models.Product, product.id)
    assert loaded.name == "Oxford shirt"
    assert loaded.price == Decimal("12.5")
    assert loaded.is_featured is True
    assert loaded.is_archived is False
    _assert_recent(loaded.created_at)
    assert loaded.category.billboard.label == "Summer"
    assert loaded.size.value == "L"
    assert loaded.color.value == "#000000"
    assert [image.url for image in loaded.images] == ["https://cdn.example.com/1.png"]
    assert [p.id for p in store.products] == [product.id]


def test_is_archived_default_comes_from_the_store(db_session, store):
    db_session.execute(
        text("INSERT INTO products (store_id, name, price) VALUES (:store_id, 'Raw', 1)"),
        {"store_id": store.id},
    )
    db_session.commit()
    is_archived = db_session.execute(text("SELECT is_archived FROM products WHERE name = 'Raw'")).scalar_one()
    assert not is_archived


def test_order_defaults_and_items(db_session, store):
    product = models.Product(store_id=store.id, name="Mug", price=Decimal("4"))
    order = models.Order(store_id=store.id, phone="555-0101")
    order.order_items = [models.OrderItem(product=product)]
    db_session.add(order)
    db_session.commit()
    db_session.expire_all()

    loaded = db_session.get(models.Order, order.id)
    assert loaded.is_paid is False
    assert loaded.address == ""
    assert loaded.phone == "555-0101"
    _assert_recent(loaded.created_at)
    assert [item.product.name for item in loaded.order_items] == ["Mug"]
    assert [item.order_id for item in product.order_items] == [order.id]


def test_city_round_trip(db_session):
    country = models.Country(name="Estonia")
    country.cities = [models.City(name="Tartu", popularity=PopularityEnum.known)]
    db_session.add(country)
    db_session.commit()
    db_session.expire_all()

    city = db_session.query(models.City).one()
    assert city.popularity == PopularityEnum.known
    assert city.country.name == "Estonia"


def test_city_popularity_outside_enum_is_rejected(db_session):
    with pytest.raises(IntegrityError):
        db_session.execute(text("INSERT INTO cities (name, popularity) VALUES ('Atlantis', 'legendary')"))
    db_session.rollback()


def test_duplicate_country_name_is_rejected(db_session):
    db_session.add(models.Country(name="Latvia"))
    db_session.commit()
    db_session.add(models.Country(name="Latvia"))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_deleting_product_removes_images(db_session, store):
    product = models.Product(store_id=store.id, name="Lamp", price=Decimal("30"))
    product.images = [models.Image(url="a.png"), models.Image(url="b.png")]
    db_session.add(product)
    db_session.commit()

    db_session.delete(product)
    db_session.commit()
    assert db_session.query(models.Image).count() == 0


def test_database_cascade_removes_images_without_orm(db_session, store):
    product = models.Product(store_id=store.id, name="Desk", price=Decimal("99"))
    product.images = [models.Image(url="desk.png")]
    db_session.add(product)
    db_session.commit()

    db_session.execute(text("DELETE FROM products WHERE id = :id"), {"id": product.id})
    db_session.commit()
    assert db_session.execute(text("SELECT COUNT(*) FROM image")).scalar_one() == 0


def test_deleting_store_with_children_is_rejected(db_session, store):
    db_session.add(models.Size(store_id=store.id, name="Small", value="S"))
    db_session.commit()

    db_session.delete(store)
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()


def test_foreign_key_to_missing_row_is_rejected(db_session):
    db_session.add(models.Store(name="Ghost", user_id=12345))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
