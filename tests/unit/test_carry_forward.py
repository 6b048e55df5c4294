"""Tests for copying sales integrations into the launch checklist."""

from handover.checklists import carry_forward_integrations


def test_top_level_integrations_are_copied():
    sales = {"integrations": ["A", "B"]}

    launch = carry_forward_integrations(sales, {})

    assert launch["integrations"] == ["A", "B"]


def test_copy_is_independent_of_sales_record():
    sales = {"integrations": ["A", {"id": "B", "keys": ["k1"]}]}

    launch = carry_forward_integrations(sales, None)
    launch["integrations"].append("C")
    launch["integrations"][1]["keys"].append("k2")

    assert sales["integrations"] == ["A", {"id": "B", "keys": ["k1"]}]


def test_group_form_is_copied_into_group():
    sales = {"integrations": {"integrations": ["razorpay"]}}
    launch_in = {"integrations": {"integrations_versions": {"razorpay": 2}}, "firebaseAccess": True}

    launch = carry_forward_integrations(sales, launch_in)

    assert launch["integrations"] == {
        "integrations": ["razorpay"],
        "integrations_versions": {"razorpay": 2},
    }
    assert launch["firebaseAccess"] is True
    assert "integrations" not in launch_in["integrations"]


def test_existing_launch_integrations_are_kept():
    sales = {"integrations": ["A", "B"]}
    launch_in = {"integrations": ["Z"]}

    assert carry_forward_integrations(sales, launch_in)["integrations"] == ["Z"]


def test_nothing_to_copy():
    launch_in = {"integrations": []}

    assert carry_forward_integrations({}, launch_in) == {"integrations": []}
    assert carry_forward_integrations({"integrations": []}, {}) == {}


def test_empty_launch_list_is_filled():
    launch = carry_forward_integrations({"integrations": ["A"]}, {"integrations": []})

    assert launch["integrations"] == ["A"]
