import math

import pytest

from bill_split.engine import (
    BillSplitError,
    IncompleteAssignmentError,
    UnknownGuestError,
    allocate,
    pre_tax_totals,
    split_item,
    validate_assignment,
)
from bill_split.models import Assignment, Guest, Item, ReceiptTotals

BRUNCH_TOTALS = ReceiptTotals(subtotal=457.00, tax=40.54, tip=91.40)


def test_item_split_two_ways():
    """A 30.00 item shared by two guests costs each 15.00."""
    items = [Item("Steak Tartare", 30.00)]
    totals = pre_tax_totals(items, 2, Assignment({0: {0, 1}}))

    assert totals == [15.00, 15.00]


def test_single_guest_gets_full_price():
    assert split_item(56.00, 1) == 56.00
    assert pre_tax_totals([Item("Entrecote", 56.00)], 3, Assignment({0: {2}})) == [0.0, 0.0, 56.00]


def test_uneven_split_is_plain_division():
    items = [Item("Pitcher Aperol", 95.00)]
    totals = pre_tax_totals(items, 3, Assignment({0: {0, 1, 2}}))

    assert totals == [95.00 / 3] * 3


def test_missing_item_raises():
    items = [Item("Coke", 6.00), Item("Espresso", 5.50)]

    with pytest.raises(IncompleteAssignmentError):
        validate_assignment(items, Assignment({0: {0}, 1: set()}))


def test_unassigned_items_are_all_reported():
    """Every empty item is listed, not just the first one."""
    items = [Item("Coke", 6.00), Item("Espresso", 5.50), Item("Macchiato", 5.50), Item("Diet Coke", 6.00)]
    assignment = Assignment({1: {0}, 2: set()})

    with pytest.raises(IncompleteAssignmentError) as excinfo:
        validate_assignment(items, assignment)

    assert excinfo.value.item_indices == (0, 2, 3)


def test_incomplete_assignment_is_a_value_error():
    assert issubclass(IncompleteAssignmentError, BillSplitError)
    assert issubclass(IncompleteAssignmentError, ValueError)


def test_allocate_produces_no_results_when_incomplete():
    guests = [Guest("Lisa"), Guest("Jana")]
    items = [Item("Coke", 6.00), Item("Espresso", 5.50)]

    with pytest.raises(IncompleteAssignmentError):
        allocate(guests, items, ReceiptTotals(11.50, 1.0, 2.0), Assignment({0: {0, 1}}))


def test_proportional_tax_and_tip():
    """A guest with 50.00 pre-tax on the brunch receipt pays 64.44 in total."""
    guests = [Guest("Dennis"), Guest("Kara")]
    items = [Item("Entrecote", 50.00), Item("Everything else", 407.00)]
    results = allocate(guests, items, BRUNCH_TOTALS, Assignment({0: {0}, 1: {1}}))
    dennis = results[0]

    assert dennis.name == "Dennis"
    assert dennis.pre_tax == 50.00
    assert dennis.tax_share == pytest.approx(50 / 457 * 40.54)
    assert dennis.tax_share == pytest.approx(4.435, abs=1e-3)
    assert dennis.tip_share == pytest.approx(10.0, abs=1e-3)
    assert round(dennis.total, 2) == 64.44


def test_total_is_sum_of_parts():
    guests = [Guest("Vincent"), Guest("Giorgio"), Guest("Carlos", "BF")]
    items = [Item("Pitcher Aperol", 95.00), Item("Espresso", 5.50), Item("Creme Brulee", 14.00)]
    assignment = Assignment({0: {0, 1, 2}, 1: {1}, 2: {0, 2}})
    results = allocate(guests, items, ReceiptTotals(114.50, 10.16, 22.90), assignment)

    for result in results:
        assert result.total == result.pre_tax + result.tax_share + result.tip_share


def test_split_fidelity():
    """Splitting neither creates nor destroys money."""
    items = [Item("Coke", 6.00), Item("Pitcher Aperol", 95.00), Item("Macchiato", 5.50), Item("Entrecote", 56.00)]
    assignment = Assignment({0: {0}, 1: {0, 1, 2}, 2: {1, 2}, 3: {0, 1, 2}})
    totals = pre_tax_totals(items, 3, assignment)

    assert math.fsum(totals) == pytest.approx(sum(item.price for item in items))


def test_extras_sum_to_receipt_when_subtotal_matches():
    guests = [Guest("Lisa"), Guest("Jana")]
    items = [Item("Salmon Benedict", 28.00), Item("Steak Frites", 34.00)]
    results = allocate(guests, items, ReceiptTotals(62.00, 5.50, 12.40), Assignment({0: {0}, 1: {0, 1}}))

    assert sum(r.tax_share for r in results) == pytest.approx(5.50)
    assert sum(r.tip_share for r in results) == pytest.approx(12.40)


def test_stale_subtotal_is_used_as_divisor():
    """Extras are shared against the stated subtotal even when items add up to less."""
    guests = [Guest("Lisa")]
    items = [Item("Coke", 50.00)]
    results = allocate(guests, items, ReceiptTotals(100.00, 10.00, 20.00), Assignment({0: {0}}))

    assert results[0].tax_share == pytest.approx(5.00)
    assert results[0].tip_share == pytest.approx(10.00)


def test_guest_with_nothing_owes_nothing():
    guests = [Guest("Kara"), Guest("Jana")]
    results = allocate(guests, [Item("Coke", 6.00)], ReceiptTotals(6.00, 0.5, 1.2), Assignment({0: {1}}))

    assert results[0].pre_tax == 0.0
    assert results[0].total == 0.0


def test_allocate_is_idempotent():
    guests = [Guest("Vincent"), Guest("Giorgio")]
    items = [Item("Espresso", 5.50), Item("Decaf Espresso", 6.00), Item("Pitcher Aperol", 95.00)]
    assignment = Assignment({0: {0}, 1: {1}, 2: {0, 1}})

    first = allocate(guests, items, BRUNCH_TOTALS, assignment)
    second = allocate(guests, items, BRUNCH_TOTALS, assignment)

    assert first == second


def test_assignment_snapshot_is_read_only():
    source = {0: {1}}
    assignment = Assignment(source)
    source[0].add(2)

    assert assignment.guests_for(0) == frozenset({1})
    assert assignment.guests_for(5) == frozenset()
    with pytest.raises(TypeError):
        assignment.guests_by_item[1] = frozenset({0})


def test_negative_guest_index_is_rejected():
    """A negative index must not wrap around to the last guest."""
    guests = [Guest("Lisa"), Guest("Jana")]

    with pytest.raises(UnknownGuestError) as excinfo:
        allocate(guests, [Item("Coke", 6.00)], ReceiptTotals(6.00, 0.0, 0.0), Assignment({0: {-1}}))

    assert excinfo.value.item_index == 0
    assert excinfo.value.guest_index == -1


def test_guest_index_past_the_end_is_rejected():
    guests = [Guest("Lisa"), Guest("Jana")]
    items = [Item("Coke", 6.00), Item("Espresso", 5.50)]

    with pytest.raises(BillSplitError) as excinfo:
        allocate(guests, items, ReceiptTotals(11.50, 1.0, 2.0), Assignment({0: {0}, 1: {1, 2}}))

    assert isinstance(excinfo.value, UnknownGuestError)
    assert excinfo.value.item_index == 1
    assert excinfo.value.guest_index == 2


def test_empty_items_are_reported_before_unknown_guests():
    items = [Item("Coke", 6.00), Item("Espresso", 5.50)]

    with pytest.raises(IncompleteAssignmentError):
        validate_assignment(items, Assignment({0: {5}}), guest_count=2)


def test_guest_range_is_only_checked_when_count_is_given():
    validate_assignment([Item("Coke", 6.00)], Assignment({0: {5}}))
