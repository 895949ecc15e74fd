import io
import re

import pytest

from petlist.demo import main, run_demo

ROW = re.compile(r"^(\d+)\s+(\S+)\s+([mh]) (\d+)$")


def demo_output():
    buffer = io.StringIO()
    run_demo(buffer)
    return buffer.getvalue()


def section_rows(text, title):
    start = text.index(f"---- Uso de {title} ----")
    rest = text[start:].split("\n")[1:]
    rows = []
    for line in rest:
        if line.startswith("----"):
            break
        match = ROW.match(line)
        if match:
            rows.append((int(match[1]), match[2], match[3], int(match[4])))
    return rows


def test_length_reported():
    assert "Tengo 6 perros\n" in demo_output()


def test_all_pets_shown_first():
    rows = section_rows(demo_output(), "get")
    assert [r[1] for r in rows] == [
        "Marquitos",
        "Lucrecia",
        "Anastacia",
        "Cinthia",
        "Milo",
        "Sebastian",
    ]


def test_filter_shows_only_females():
    rows = section_rows(demo_output(), "filter")
    assert {r[2] for r in rows} == {"h"}
    assert [r[1] for r in rows] == ["Lucrecia", "Anastacia", "Cinthia"]


def test_remove_drops_second_pet():
    rows = section_rows(demo_output(), "remove")
    assert len(rows) == 5
    assert "Lucrecia" not in [r[1] for r in rows]


def test_index_and_contains():
    text = demo_output()
    assert "El indice donde esta marquitos es 0 \n " in text
    assert "contains es 1 \n " in text


def test_sublist_is_contained():
    text = demo_output()
    remaining = section_rows(text, "remove")
    assert section_rows(text, "sublist") == remaining[1:3]
    assert "El valor de containsAll es 1" in text


def test_clone_matches_list():
    text = demo_output()
    assert section_rows(text, "clone") == section_rows(text, "remove")


def test_sort_orders_by_age():
    rows = section_rows(demo_output(), "sort")
    ages = [r[3] for r in rows]
    assert len(ages) == 5
    assert ages == sorted(ages)


def test_insert_then_pop():
    text = demo_output()
    inserted = section_rows(text, "insert")
    assert inserted[4][1] == "claudio"
    assert len(inserted) == 6
    assert section_rows(text, "pop") == section_rows(text, "sort")


def test_set_replaces_first():
    text = demo_output()
    rows = section_rows(text, "set")
    assert rows[0][1] == "claudio"
    assert rows[1:] == section_rows(text, "pop")[1:]


def test_clear_empties_list():
    text = demo_output()
    assert text.endswith("El valor de isEmpty es 1 porque la lista ahora esta vacia\n ")


def test_main_writes_demo(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == demo_output()


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])