"""
Tests for recording Stripe charges.

Covers the upsert keyed by (user, stripe charge id), the explicit error
for unknown customers and both card layouts Stripe sends.
"""
import pytest

from payments.handlers import ChargeSucceeded, MalformedEvent, RecordCharges, UnknownCustomer
from payments.models import Charge


def charge_event(charge_id="ch_123", customer="cus_abc", amount=1500, **card):
    source = {"object": "card", "last4": "4242", "brand": "Visa", "exp_month": 8, "exp_year": 2030}
    source.update(card)
    return {
        "id": "evt_1",
        "type": "charge.succeeded",
        "data": {"object": {"id": charge_id, "object": "charge", "customer": customer, "amount": amount, "source": source}},
    }


@pytest.fixture
def customer(user):
    user.profile.stripe_id = "cus_abc"
    user.profile.save()
    return user


@pytest.mark.django_db
def test_records_charge_for_customer(customer):
    charge = RecordCharges()(charge_event())
    assert charge.user == customer
    assert charge.stripe_id == "ch_123"
    assert charge.amount == 1500
    assert (charge.card_last4, charge.card_type) == ("4242", "Visa")
    assert (charge.card_exp_month, charge.card_exp_year) == (8, 2030)


@pytest.mark.django_db
def test_replayed_event_keeps_one_charge_with_last_values(customer):
    record = RecordCharges()
    record(charge_event(amount=1500))
    record(charge_event(amount=1500))
    record(charge_event(amount=2000, last4="0005", brand="MasterCard"))

    charges = Charge.objects.filter(user=customer, stripe_id="ch_123")
    assert charges.count() == 1
    charge = charges.get()
    assert charge.amount == 2000
    assert (charge.card_last4, charge.card_type) == ("0005", "MasterCard")


@pytest.mark.django_db
def test_distinct_charge_ids_are_separate_rows(customer):
    record = RecordCharges()
    record(charge_event(charge_id="ch_1"))
    record(charge_event(charge_id="ch_2"))
    assert Charge.objects.filter(user=customer).count() == 2


@pytest.mark.django_db
def test_unknown_customer_raises(customer):
    with pytest.raises(UnknownCustomer) as exc:
        RecordCharges()(charge_event(customer="cus_missing"))
    assert exc.value.customer_id == "cus_missing"
    assert exc.value.charge_id == "ch_123"
    assert Charge.objects.count() == 0


def test_missing_customer_is_malformed():
    event = charge_event()
    del event["data"]["object"]["customer"]
    with pytest.raises(MalformedEvent):
        ChargeSucceeded.from_event(event)


def test_card_from_payment_method_details():
    event = charge_event()
    obj = event["data"]["object"]
    del obj["source"]
    obj["payment_method_details"] = {
        "type": "card",
        "card": {"last4": "1881", "brand": "amex", "exp_month": 1, "exp_year": 2031},
    }
    payload = ChargeSucceeded.from_event(event)
    assert payload.card_last4 == "1881"
    assert payload.card_type == "amex"
    assert payload.card_exp_year == 2031


def test_event_without_card_details():
    event = charge_event()
    del event["data"]["object"]["source"]
    payload = ChargeSucceeded.from_event(event)
    assert payload.card_last4 == ""
    assert payload.card_exp_month is None


@pytest.mark.parametrize(
    "field, value",
    [
        ("source", "card_123"),
        ("exp_month", "December"),
        ("exp_month", 13),
        ("exp_year", "soon"),
        ("amount", -5),
        ("amount", "lots"),
        ("payment_method_details", "pm_123"),
    ],
)
def test_bad_field_values_are_malformed(field, value):
    event = charge_event()
    obj = event["data"]["object"]
    if field in ("exp_month", "exp_year"):
        obj["source"][field] = value
    elif field == "payment_method_details":
        del obj["source"]
        obj[field] = value
    else:
        obj[field] = value
    with pytest.raises(MalformedEvent):
        ChargeSucceeded.from_event(event)


def test_numeric_strings_in_expiry_are_accepted():
    payload = ChargeSucceeded.from_event(charge_event(exp_month="08", exp_year="2030"))
    assert (payload.card_exp_month, payload.card_exp_year) == (8, 2030)


@pytest.mark.django_db
def test_malformed_event_records_nothing(customer):
    with pytest.raises(MalformedEvent):
        RecordCharges()(charge_event(amount=-5))
    assert Charge.objects.count() == 0
