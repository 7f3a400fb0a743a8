"""Inventory CSV — verifies header, quoting and the available column."""

from wms.core.csv_report import InventoryCsvRow, render_inventory_csv

HEADER = "SKU,Name,Category,Warehouse,Zone,Bin,Quantity,Allocated,Available\n"


def test_empty_report_is_header_only():
    assert render_inventory_csv([]) == HEADER


def test_strings_quoted_numbers_bare():
    row = InventoryCsvRow(
        sku="SKU-1", name="Widget", category="Tools", warehouse="Main",
        zone="A", bin_code="A-01", quantity=10, allocated=3,
    )
    lines = render_inventory_csv([row]).splitlines()
    assert lines[1] == '"SKU-1","Widget","Tools","Main","A","A-01",10,3,7'


def test_embedded_quotes_and_commas_escaped():
    row = InventoryCsvRow(
        sku="S,2", name='12" Pipe', category="", warehouse="W",
        zone="Z", bin_code="B", quantity=1, allocated=0,
    )
    line = render_inventory_csv([row]).splitlines()[1]
    assert line == '"S,2","12"" Pipe","","W","Z","B",1,0,1'
