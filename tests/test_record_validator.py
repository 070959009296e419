from decimal import Decimal

import pytest

from car_inventory.domain.models import CandidateRecord, InventoryRecord, RejectionRecord
from car_inventory.domain.rules import ValidationRules
from car_inventory.domain.services import RecordValidator, is_valid_id, is_valid_model


def make_candidate(
    car_id: str = "AB12345678",
    model: str = "ModelX",
    quantity: int = 5,
    price: str = "30000.00",
) -> CandidateRecord:
    return CandidateRecord(id=car_id, model=model, quantity=quantity, price=Decimal(price))


@pytest.mark.parametrize("car_id", ["AB12345678", "xy9Z8W7V00", "ZZAAAAAA12"])
def test_valid_ids(car_id: str):
    assert is_valid_id(car_id)


@pytest.mark.parametrize(
    "car_id",
    [
        "AB1234567",  # 9 characters
        "AB123456789",  # 11 characters
        "OB12345678",
        "oB12345678",
        "AO12345678",
        "AB1234O678",
        "AB12345o78",
        "A112345678",  # digit in prefix
        "AB12-45678",
        "AB123456X8",  # letter in suffix
        "ÄB12345678",
    ],
)
def test_invalid_ids(car_id: str):
    assert not is_valid_id(car_id)


def test_o_banned_in_every_one_of_first_eight_positions():
    base = "AB12345678"
    for position in range(8):
        for letter in "oO":
            car_id = base[:position] + letter + base[position + 1 :]
            assert not is_valid_id(car_id), car_id


def test_zero_digit_is_allowed_in_suffix_and_body():
    assert is_valid_id("AB10000000")


@pytest.mark.parametrize("model", ["ModelX", "Abc", "Epsilon345"])
def test_valid_models(model: str):
    assert is_valid_model(model)


@pytest.mark.parametrize("model", ["Ab", "1Model", "Bad_Model", "Bad-Model", "_Model", ""])
def test_invalid_models(model: str):
    assert not is_valid_model(model)


def test_accepts_valid_candidate_verbatim():
    validator = RecordValidator()

    result = validator.validate(make_candidate(car_id="ab12345678", model="modelx"))

    assert result == InventoryRecord(id="ab12345678", model="modelx", quantity=5, price=Decimal("30000.00"))


def test_single_reason_for_bad_id():
    result = RecordValidator().validate(make_candidate(car_id="EF1234O678", model="ModelZ", quantity=3, price="26000"))

    assert isinstance(result, RejectionRecord)
    assert result.reasons == ("Invalid ID",)
    assert result.text == "EF1234O678 ModelZ 3 26000"


def test_all_reasons_accumulate_in_fixed_order():
    result = RecordValidator().validate(make_candidate(car_id="OO", model="1x", quantity=0, price="100"))

    assert isinstance(result, RejectionRecord)
    assert result.reasons == (
        "Invalid ID",
        "Invalid model",
        "Quantity must be above zero",
        "Price must be above $24995.00",
    )
    assert result.reason_text == (
        "Invalid ID; Invalid model; Quantity must be above zero; Price must be above $24995.00;"
    )


def test_quantity_and_price_reported_together():
    result = RecordValidator().validate(make_candidate(car_id="QR12345678", model="Beta456", quantity=0, price="20000"))

    assert isinstance(result, RejectionRecord)
    assert result.reasons == ("Quantity must be above zero", "Price must be above $24995.00")
    assert result.to_log_line() == (
        "QR12345678 Beta456 0 20000 - Quantity must be above zero; Price must be above $24995.00;"
    )


@pytest.mark.parametrize(
    ("quantity", "accepted"),
    [(-5, False), (0, False), (1, True)],
)
def test_quantity_boundary(quantity: int, accepted: bool):
    result = RecordValidator().validate(make_candidate(quantity=quantity))

    assert isinstance(result, InventoryRecord) is accepted


@pytest.mark.parametrize(
    ("price", "accepted"),
    [("24995.00", False), ("24995", False), ("24995.01", True), ("24000", False)],
)
def test_price_floor_boundary(price: str, accepted: bool):
    result = RecordValidator().validate(make_candidate(price=price))

    assert isinstance(result, InventoryRecord) is accepted


def test_custom_rules_change_floor_and_reason():
    rules = ValidationRules(price_floor=Decimal("1000"))
    validator = RecordValidator(rules)

    result = validator.validate(make_candidate(price="999.99"))

    assert isinstance(result, RejectionRecord)
    assert result.reasons == ("Price must be above $1000.00",)
    assert isinstance(validator.validate(make_candidate(price="1000.01")), InventoryRecord)


def test_custom_id_length_extends_digit_suffix():
    validator = RecordValidator(ValidationRules(id_length=12))

    assert isinstance(validator.validate(make_candidate(car_id="AB1234567890")), InventoryRecord)
    assert isinstance(validator.validate(make_candidate(car_id="AB12345678")), RejectionRecord)


def test_revalidating_accepted_record_is_accepted_again():
    validator = RecordValidator()
    accepted = validator.validate(make_candidate())
    assert isinstance(accepted, InventoryRecord)

    again = validator.validate(
        CandidateRecord(id=accepted.id, model=accepted.model, quantity=accepted.quantity, price=accepted.price)
    )

    assert again == accepted


def test_rejection_requires_a_reason():
    with pytest.raises(ValueError):
        RejectionRecord(text="AB12345678 ModelX 5 30000", reasons=())
