import io

import pytest

from turbolib.hash_table import HashTable, Record

ITEMS = {
    "Dodge": "Auburn Hills, Michigan",
    "Ford": "Dearborn, Michigan",
    "Chevrolet": "Detroit, Michigan",
    "Ferrari": "Maranello, Italy",
    "Lamborghini": "Bolognese, Italy",
    "Porsche": "Stuttgart, Germany",
}


def _filled():
    table = HashTable(10, 5)
    for key in sorted(ITEMS):
        table.create_item(key, ITEMS[key])
    return table


def test_create_and_query():
    table = _filled()
    record = table.query_item("Porsche")
    assert record.value == "Stuttgart, Germany"
    for key, value in ITEMS.items():
        assert table.query_item(key) == Record(key, value)


def test_deleted_item_not_found():
    table = _filled()
    table.delete_item("Dodge")
    with pytest.raises(KeyError, match="item not found"):
        table.query_item("Dodge")
    assert table.query_item("Ford").value == "Dearborn, Michigan"


def test_query_missing_raises():
    with pytest.raises(KeyError):
        HashTable(4, 2).query_item("absent")


def test_empty_key_rejected():
    table = HashTable(4, 2)
    with pytest.raises(ValueError, match="key cannot be empty"):
        table.create_item("", "value")
    with pytest.raises(ValueError):
        table.update_item("", "value")


def test_update_existing_and_missing():
    table = _filled()
    table.update_item("Ford", "Detroit")
    assert table.query_item("Ford").value == "Detroit"
    with pytest.raises(KeyError):
        table.update_item("Tesla", "Austin, Texas")


def test_delete_missing_raises():
    with pytest.raises(KeyError):
        HashTable(3, 1).delete_item("nothing")


def test_bucket_grows_when_full():
    table = HashTable(1, 1)
    table.create_item("a", "1")
    table.create_item("b", "2")
    assert table.depth == 2
    assert table.query_item("a").value == "1"
    assert table.query_item("b").value == "2"


def test_slot_reused_after_delete():
    table = HashTable(1, 1)
    table.create_item("a", "1")
    table.delete_item("a")
    table.create_item("b", "2")
    assert table.depth == 1
    assert table.query_item("b").value == "2"


def test_format_table():
    table = HashTable(2, 2)
    table.create_item("ab", "x")
    assert table.format_table() == "[\n    [{ab: x}, nil]\n    [nil, nil]\n]"


def test_print_table_writes_format_and_newline():
    table = _filled()
    out = io.StringIO()
    table.print_table(out)
    text = out.getvalue()
    assert text == table.format_table() + "\n"
    assert "{Porsche: Stuttgart, Germany}" in text
    assert text.count("\n") == 12