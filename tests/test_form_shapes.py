import itertools

import pytest

from src.nakliye.data import options
from src.nakliye.models.domain import FieldDescriptor, FieldType, FormState
from src.nakliye.services.forms import (
    MissingRequiredFieldError,
    UnknownKindError,
    get_resolver,
)


def _filled_value(descriptor: FieldDescriptor):
    match descriptor.type:
        case FieldType.CHOICE:
            return descriptor.options[0]
        case FieldType.NUMBER:
            return 5
        case FieldType.DATE:
            return "2024-06-01"
        case FieldType.BOOLEAN:
            return True
        case _:
            return f"{descriptor.key}-value"


def _complete_state(form: str, kind: str) -> FormState:
    resolver = get_resolver(form)
    return FormState(kind=kind, payload={d.key: _filled_value(d) for d in resolver.fields_for(kind)})


def _kind_pairs(form: str):
    return [(form, old, new) for old, new in itertools.permutations(get_resolver(form).kinds, 2)]


def test_freight_fields_start_with_shared_fields():
    keys = get_resolver("freight").field_keys("Ticari")

    assert keys[:3] == ("companyName", "contactPerson", "contactEmail")
    assert keys.index("description") < keys.index("cargoType")
    assert keys[-8:] == (
        "cargoType",
        "vehicleNeeded",
        "loadingType",
        "cargoForm",
        "cargoWeight",
        "cargoWeightUnit",
        "isContinuousLoad",
        "shipmentScope",
    )


def test_required_freight_fields_per_kind():
    resolver = get_resolver("freight")

    def required(kind):
        shared = {d.key for d in resolver.shared}
        return [d.key for d in resolver.fields_for(kind) if d.required and d.key not in shared]

    assert required("Evden Eve") == [
        "residentialTransportType",
        "residentialPlaceType",
        "residentialElevatorStatus",
        "residentialFloorLevel",
    ]
    assert required("Boş Araç") == [
        "advertisedVehicleType",
        "serviceTypeForLoad",
        "vehicleStatedCapacity",
        "vehicleStatedCapacityUnit",
    ]
    continuous = next(d for d in resolver.fields_for("Ticari") if d.key == "isContinuousLoad")
    assert continuous.type is FieldType.BOOLEAN
    assert not continuous.required
    assert continuous.default is False


def test_unknown_kind_has_empty_field_set():
    assert get_resolver("freight").fields_for("Yük") == ()
    assert get_resolver("hero-slide").fields_for("carousel") == ()


def test_new_state_uses_kind_defaults():
    state = get_resolver("freight").new_state("Boş Araç")

    assert state.kind == "Boş Araç"
    assert state.payload["originCountry"] == "TR"
    assert state.payload["vehicleStatedCapacityUnit"] == "Ton"
    assert state.payload["vehicleStatedCapacity"] is None
    assert state.payload["isActive"] is True


def test_commercial_to_residential_switch_keeps_shared_fields_only():
    resolver = get_resolver("freight")
    state = FormState(
        kind="Ticari",
        payload={
            "cargoType": "Tekstil",
            "cargoWeight": 12,
            "companyName": "X",
            "mobilePhone": "555",
            "loadingDate": "2024-06-01",
        },
    )

    result = resolver.on_kind_changed("Evden Eve", state)

    assert result.kind == "Evden Eve"
    assert result.payload["companyName"] == "X"
    assert result.payload["mobilePhone"] == "555"
    assert result.payload["loadingDate"] == "2024-06-01"
    assert "cargoType" not in result.payload
    assert "cargoWeight" not in result.payload
    assert result.payload["residentialTransportType"] == ""
    assert result.payload["residentialFloorLevel"] == ""


def test_hero_slide_switch_to_title_only_drops_button():
    resolver = get_resolver("hero-slide")
    state = FormState(kind="centered", payload={"title": "Promo", "buttonText": "Git"})

    result = resolver.on_kind_changed("title-only", state)

    assert result.payload["title"] == "Promo"
    assert "buttonText" not in result.payload
    assert result.payload["backgroundImageUrl"] == ""


def test_hero_slide_switch_resets_fields_shared_by_both_kinds():
    resolver = get_resolver("hero-slide")
    state = FormState(kind="centered", payload={"title": "Promo", "buttonText": "Git", "order": 3})

    result = resolver.on_kind_changed("video-background", state)

    assert result.payload["buttonText"] == ""
    assert result.payload["order"] == 3


@pytest.mark.parametrize("form,old,new", _kind_pairs("freight") + _kind_pairs("hero-slide"))
def test_kind_switch_preserves_allowlist_and_drops_exclusive_fields(form, old, new):
    resolver = get_resolver(form)
    state = _complete_state(form, old)

    result = resolver.on_kind_changed(new, state)

    for key in resolver.carry_over:
        assert result.payload[key] == state.payload[key]
    new_keys = set(resolver.field_keys(new))
    for key in state.payload:
        if key not in new_keys and key not in resolver.carry_over:
            assert key not in result.payload
    assert set(result.payload) == new_keys


def test_switch_to_same_kind_is_a_no_op():
    resolver = get_resolver("freight")
    state = _complete_state("freight", "Ticari")

    assert resolver.on_kind_changed("Ticari", state) is state


def test_switch_to_unknown_kind_keeps_shared_fields_only():
    resolver = get_resolver("freight")
    state = _complete_state("freight", "Evden Eve")

    result = resolver.on_kind_changed("Yük", state)

    assert set(result.payload) == set(resolver.carry_over)
    assert result.payload["companyName"] == "companyName-value"


@pytest.mark.parametrize(
    "form,kind",
    [("freight", kind) for kind in get_resolver("freight").kinds]
    + [("hero-slide", kind) for kind in get_resolver("hero-slide").kinds],
)
def test_required_check_names_first_missing_field(form, kind):
    resolver = get_resolver(form)
    complete = _complete_state(form, kind)
    resolver.validate(complete)

    for descriptor in resolver.fields_for(kind):
        if not descriptor.required:
            continue
        payload = complete.as_dict()
        payload[descriptor.key] = None if descriptor.type is FieldType.NUMBER else ""

        with pytest.raises(MissingRequiredFieldError) as excinfo:
            resolver.validate(FormState(kind=kind, payload=payload))

        assert excinfo.value.field == descriptor.key
        assert excinfo.value.kind == kind


def test_empty_vehicle_missing_capacity_is_reported():
    resolver = get_resolver("freight")
    payload = _complete_state("freight", "Boş Araç").as_dict()
    del payload["vehicleStatedCapacity"]

    assert resolver.first_missing(FormState(kind="Boş Araç", payload=payload)) == "vehicleStatedCapacity"


@pytest.mark.parametrize("capacity", [0, -3, "0", "", "   ", "abc", True, "nan", "inf", float("inf")])
def test_capacity_must_be_strictly_positive(capacity):
    resolver = get_resolver("freight")
    payload = _complete_state("freight", "Boş Araç").as_dict()
    payload["vehicleStatedCapacity"] = capacity

    assert resolver.first_missing(FormState(kind="Boş Araç", payload=payload)) == "vehicleStatedCapacity"


@pytest.mark.parametrize("weight", [12, 0.5, "12", "12,5"])
def test_weight_accepts_positive_numbers_and_numeric_text(weight):
    resolver = get_resolver("freight")
    payload = _complete_state("freight", "Ticari").as_dict()
    payload["cargoWeight"] = weight

    resolver.validate(FormState(kind="Ticari", payload=payload))


def test_continuous_load_is_never_missing():
    resolver = get_resolver("freight")
    payload = _complete_state("freight", "Ticari").as_dict()
    payload.pop("isContinuousLoad")

    assert resolver.first_missing(FormState(kind="Ticari", payload=payload)) is None


def test_hero_slide_order_zero_is_allowed():
    resolver = get_resolver("hero-slide")
    payload = _complete_state("hero-slide", "split").as_dict()
    payload["order"] = 0

    resolver.validate(FormState(kind="split", payload=payload))


def test_validate_rejects_unknown_kind():
    with pytest.raises(UnknownKindError) as excinfo:
        get_resolver("freight").validate(FormState(kind="Yük", payload={"companyName": "X"}))

    assert excinfo.value.kind == "Yük"


def test_dispatcher_caches_and_rejects_unknown_forms():
    assert get_resolver("freight") is get_resolver("freight")
    with pytest.raises(LookupError):
        get_resolver("sponsor")


def test_kinds_follow_option_tables_and_carry_labels():
    hero = get_resolver("hero-slide")

    assert hero.kinds == options.HERO_SLIDE_TYPES
    assert hero.label_for("split") == "İki Kolonlu Tanıtım"
    assert get_resolver("freight").kinds == options.FREIGHT_TYPES
    assert get_resolver("freight").label_for("Ticari") == "Ticari"
