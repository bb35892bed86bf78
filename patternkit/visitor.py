"""Financial instruments and visitors that value, rate and report them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeVar

R = TypeVar("R", covariant=True)


class InstrumentVisitor(Protocol[R]):
    """An operation over every kind of instrument."""

    def visit_stock(self, stock: Stock) -> R: ...

    def visit_bond(self, bond: Bond) -> R: ...

    def visit_option(self, option: Option) -> R: ...


@dataclass
class Stock:
    symbol: str
    price: float
    volume: int

    def accept(self, visitor: InstrumentVisitor[R]) -> R:
        return visitor.visit_stock(self)


@dataclass
class Bond:
    id: str
    face_value: float
    coupon_rate: float
    years_to_maturity: int

    def accept(self, visitor: InstrumentVisitor[R]) -> R:
        return visitor.visit_bond(self)


@dataclass
class Option:
    contract_id: str
    option_type: str
    strike_price: float
    expiration_date: str

    def accept(self, visitor: InstrumentVisitor[R]) -> R:
        return visitor.visit_option(self)


@dataclass
class ValuationVisitor:
    """Sums a simplified value of the visited instruments."""

    total_value: float = 0.0

    def visit_stock(self, stock: Stock) -> float:
        value = stock.price * stock.volume
        print(f"Calculating Value for Stock {stock.symbol}: {value:.2f}")
        self.total_value += value
        return value

    def visit_bond(self, bond: Bond) -> float:
        value = bond.face_value * (1 + bond.coupon_rate * bond.years_to_maturity)
        print(f"Calculating Value for Bond {bond.id}: {value:.2f} (simplified)")
        self.total_value += value
        return value

    def visit_option(self, option: Option) -> None:
        print(
            f"Calculating Value for Option {option.contract_id} ({option.option_type}): "
            "Requires complex model (e.g., Black-Scholes)."
        )
        return None


@dataclass
class RiskAssessmentVisitor:
    """Sums a simplified risk score of the visited instruments."""

    overall_risk_score: float = 0.0

    def visit_stock(self, stock: Stock) -> float:
        risk = stock.volume * 0.1
        print(f"Assessing Risk for Stock {stock.symbol}: Risk Score = {risk:.2f}")
        self.overall_risk_score += risk
        return risk

    def visit_bond(self, bond: Bond) -> float:
        risk = bond.years_to_maturity * 0.5
        print(f"Assessing Risk for Bond {bond.id}: Risk Score = {risk:.2f}")
        self.overall_risk_score += risk
        return risk

    def visit_option(self, option: Option) -> float:
        risk = 5.0
        print(
            f"Assessing Risk for Option {option.contract_id} ({option.option_type}): "
            f"Risk Score = {risk:.2f} (High Leverage)"
        )
        self.overall_risk_score += risk
        return risk


class ReportingVisitor:
    """Prints and returns one report line per instrument."""

    def visit_stock(self, stock: Stock) -> str:
        line = (
            f"Report Item: Stock - Symbol: {stock.symbol}, "
            f"Price: {stock.price:.2f}, Volume: {stock.volume}"
        )
        print(line)
        return line

    def visit_bond(self, bond: Bond) -> str:
        line = (
            f"Report Item: Bond - ID: {bond.id}, Face Value: {bond.face_value:.2f}, "
            f"Coupon: {bond.coupon_rate * 100:.2f}%, Maturity: {bond.years_to_maturity} yrs"
        )
        print(line)
        return line

    def visit_option(self, option: Option) -> str:
        line = (
            f"Report Item: Option - Contract ID: {option.contract_id}, "
            f"Type: {option.option_type}, Strike: {option.strike_price:.2f}, "
            f"Expiry: {option.expiration_date}"
        )
        print(line)
        return line


def main(argv: Sequence[str] | None = None) -> None:
    """Value, rate and report a sample portfolio."""
    portfolio = [
        Stock("AAPL", 170.0, 100),
        Bond("CORP-B-001", 1000.0, 0.05, 10),
        Option("AAPL-C-200-JUL25", "Call", 200.0, "2025-07-18"),
        Stock("GOOG", 1800.0, 50),
        Bond("GOV-B-002", 5000.0, 0.03, 5),
    ]

    print("--- Running Valuation ---")
    valuation = ValuationVisitor()
    for instrument in portfolio:
        instrument.accept(valuation)
    print(f"Total Portfolio Value (simplified): {valuation.total_value:.2f}")

    print("\n--- Running Risk Assessment ---")
    risk = RiskAssessmentVisitor()
    for instrument in portfolio:
        instrument.accept(risk)
    print(f"Overall Portfolio Risk Score (simplified): {risk.overall_risk_score:.2f}")

    print("\n--- Running Reporting ---")
    reporting = ReportingVisitor()
    for instrument in portfolio:
        instrument.accept(reporting)


if __name__ == "__main__":
    main()