import pytest

from patternkit.visitor import (
    Bond,
    Option,
    ReportingVisitor,
    RiskAssessmentVisitor,
    Stock,
    ValuationVisitor,
    main,
)


class _Recorder:
    def __init__(self):
        self.calls = []

    def visit_stock(self, stock):
        self.calls.append(("stock", stock))
        return "s"

    def visit_bond(self, bond):
        self.calls.append(("bond", bond))
        return "b"

    def visit_option(self, option):
        self.calls.append(("option", option))
        return "o"


def _portfolio():
    return [
        Stock("AAPL", 170.0, 100),
        Bond("CORP-B-001", 1000.0, 0.05, 10),
        Option("AAPL-C-200-JUL25", "Call", 200.0, "2025-07-18"),
    ]


def test_accept_dispatches_to_matching_method():
    recorder = _Recorder()
    results = [item.accept(recorder) for item in _portfolio()]
    assert results == ["s", "b", "o"]
    assert [kind for kind, _ in recorder.calls] == ["stock", "bond", "option"]
    assert recorder.calls[0][1] is not None and recorder.calls[0][1].symbol == "AAPL"


def test_stock_value():
    visitor = ValuationVisitor()
    assert Stock("X", 2.5, 4).accept(visitor) == pytest.approx(10.0)


def test_bond_without_maturity_is_worth_face_value():
    visitor = ValuationVisitor()
    assert Bond("B", 750.0, 0.05, 0).accept(visitor) == pytest.approx(750.0)


def test_option_adds_no_value(capsys):
    visitor = ValuationVisitor()
    assert Option("C1", "Put", 10.0, "2030-01-01").accept(visitor) is None
    assert visitor.total_value == 0.0
    assert "Requires complex model" in capsys.readouterr().out


def test_total_value_is_sum_of_items():
    visitor = ValuationVisitor()
    values = [item.accept(visitor) for item in _portfolio()]
    assert visitor.total_value == pytest.approx(sum(v for v in values if v is not None))


def test_option_risk_is_fixed():
    visitor = RiskAssessmentVisitor()
    assert Option("C1", "Call", 1.0, "2030-01-01").accept(visitor) == 5.0
    assert visitor.overall_risk_score == 5.0


def test_bond_risk_zero_without_maturity():
    assert RiskAssessmentVisitor().visit_bond(Bond("B", 1.0, 0.1, 0)) == 0.0


def test_risk_accumulates():
    stock = Stock("S", 1.0, 30)
    single = RiskAssessmentVisitor()
    single_score = stock.accept(single)
    double = RiskAssessmentVisitor()
    stock.accept(double)
    stock.accept(double)
    assert double.overall_risk_score == pytest.approx(2 * single_score)
    assert single.overall_risk_score == pytest.approx(single_score)


def test_stock_report_line(capsys):
    line = Stock("AAPL", 170.0, 100).accept(ReportingVisitor())
    assert line == "Report Item: Stock - Symbol: AAPL, Price: 170.00, Volume: 100"
    assert capsys.readouterr().out.strip() == line


def test_option_report_line_carries_fields():
    line = ReportingVisitor().visit_option(Option("AAPL-C-200-JUL25", "Call", 200.0, "2025-07-18"))
    assert line.startswith("Report Item: Option - Contract ID: AAPL-C-200-JUL25")
    assert "Expiry: 2025-07-18" in line


def test_bond_report_line_carries_fields():
    line = ReportingVisitor().visit_bond(Bond("GOV-B-002", 5000.0, 0.0, 5))
    assert "ID: GOV-B-002" in line
    assert line.endswith("Maturity: 5 yrs")


def test_main_runs_all_sections(capsys):
    main()
    out = capsys.readouterr().out
    assert "--- Running Valuation ---" in out
    assert "--- Running Risk Assessment ---" in out
    assert "--- Running Reporting ---" in out