import math

from core.config import ProjectionConfig
from core.utils import NEVER, fmt_currency, fmt_number
from engine.parameters import InputParameters, ProjectionResult
from engine.runner import run_projection
from report.tables import build_results_table, cumulative_long_frame, headline_cards


def _never_result():
    return ProjectionResult(
        label="PAST",
        annual_saving=0.0,
        payback_years=NEVER,
        cumulative_savings_by_year=(0.0,) * 5,
    )


def test_fmt_number_placeholders():
    assert fmt_number(1.005, 1) == "1.0"
    assert fmt_number(0.62399) == "0.62"
    assert fmt_number(math.inf) == "—"
    assert fmt_number(math.nan) == "—"
    assert fmt_currency(1602.592992) == "£1602.59"
    assert fmt_currency(-209.489, symbol="$") == "$-209.49"
    assert fmt_currency(math.inf) == "—"


def test_results_table_columns_and_order():
    results = run_projection(InputParameters())
    table = build_results_table(results)
    assert list(table.columns) == [
        "Option", "Annual £ saving", "Payback (yrs)",
        "Cum £ Yr 1", "Cum £ Yr 2", "Cum £ Yr 3", "Cum £ Yr 4", "Cum £ Yr 5",
    ]
    assert list(table["Option"]) == ["Propelair 135", "PAST", "Analogue"]
    assert table.loc[0, "Annual £ saving"] == "£1602.59"
    assert table.loc[0, "Payback (yrs)"] == "0.62"


def test_results_table_never_payback_placeholder():
    table = build_results_table([_never_result()])
    assert table.loc[0, "Payback (yrs)"] == "—"
    assert table.loc[0, "Cum £ Yr 5"] == "£0.00"


def test_results_table_numeric():
    results = run_projection(InputParameters(inflation_rate_percent=0))
    table = build_results_table(results, formatted=False)
    assert table["Annual £ saving"].dtype == float
    assert table.loc[1, "Cum £ Yr 3"] == results[1].annual_saving * 3
    assert math.isinf(build_results_table([_never_result()], formatted=False).loc[0, "Payback (yrs)"])


def test_results_table_follows_config():
    cfg = ProjectionConfig(years_shown=3, currency_symbol="$")
    table = build_results_table(run_projection(InputParameters(), cfg), cfg)
    assert table.columns[-1] == "Cum $ Yr 3"
    assert table.loc[0, "Annual £ saving"].startswith("$")


def test_cumulative_long_frame():
    long = cumulative_long_frame(run_projection(InputParameters()))
    assert len(long) == 15
    assert list(long.columns) == ["option", "year", "cumulative_saving"]
    assert list(long["year"][:5]) == [1, 2, 3, 4, 5]
    assert len(cumulative_long_frame([])) == 0


def test_headline_cards():
    cards = headline_cards(run_projection(InputParameters()) + [_never_result()])
    assert cards[0].label == "Propelair 135"
    assert cards[0].yearly_saving == "£1602.59"
    assert cards[0].payback_text == "Payback in 0.62 yrs"
    assert cards[-1].payback_text == "Payback in — yrs"
