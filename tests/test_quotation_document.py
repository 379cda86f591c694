from pathlib import Path

import bizadmin
from bizadmin.services.quotation_document import (
    TEMPLATE_PATH,
    build_context_from_quotation,
    build_rows_html,
    render_quotation_html,
)


def test_rows_compute_line_totals():
    html = build_rows_html([{"description": "Hours", "quantity": 3, "price": 120}], "USD")
    assert '<td class="col-qty">3</td>' in html
    assert "360.00 USD" in html


def test_values_are_html_escaped():
    ctx = build_context_from_quotation(
        {"id": "Q-001", "clientName": "<script>x</script>", "items": []},
        {"name": "Me & Co"},
    )
    assert ctx["client_name"] == "&lt;script&gt;x&lt;/script&gt;"
    assert ctx["company_name"] == "Me &amp; Co"


def test_missing_fields_render_empty(tmp_path):
    tpl = tmp_path / "t.html"
    tpl.write_text("<p>[[client_name]]|[[total_value]]|[[unknown_key]]</p>", encoding="utf-8")
    ctx = build_context_from_quotation({"id": "Q-009"}, {})
    assert render_quotation_html(ctx, tpl) == "<p>||</p>"


def test_placeholders_inside_values_are_not_expanded(tmp_path):
    tpl = tmp_path / "t.html"
    tpl.write_text("[[client_name]] / [[quotation_id]]", encoding="utf-8")
    ctx = build_context_from_quotation({"id": "Q-1", "clientName": "[[quotation_id]]"}, {})
    assert render_quotation_html(ctx, tpl) == "[[quotation_id]] / Q-1"


def test_template_ships_inside_the_package():
    package_dir = Path(list(bizadmin.__path__)[0]).resolve()
    assert TEMPLATE_PATH.is_file()
    assert package_dir in TEMPLATE_PATH.parents
