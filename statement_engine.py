from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple
from types import MappingProxyType
from decimal import Decimal, ROUND_HALF_UP
from dataclasses import dataclass
import logging
import sys


logger = logging.getLogger(__name__)


# ==================== Configuration ====================

class Constants:
    """Fixed pricing constants, all amounts in cents"""
    TRAGEDY_BASE_AMOUNT = 40000
    TRAGEDY_AUDIENCE_THRESHOLD = 30
    TRAGEDY_EXTRA_PER_AUDIENCE = 1000

    COMEDY_BASE_AMOUNT = 30000
    COMEDY_AUDIENCE_THRESHOLD = 20
    COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
    COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
    COMEDY_AMOUNT_PER_AUDIENCE = 300

    BASE_VOLUME_CREDIT_THRESHOLD = 30
    COMEDY_EXTRA_VOLUME_FACTOR = 5

    PERCENT_FACTOR = 100


# ==================== Enums ====================

class PlayType(Enum):
    """Play genres with a pricing formula"""
    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_value(cls, value: str) -> Optional['PlayType']:
        """Return the genre for a raw type string, None if it is not one we price"""
        for play_type in cls:
            if play_type.value == value:
                return play_type
        return None


# ==================== Exceptions ====================

class StatementError(Exception):
    """Base error for statement generation"""


class UnknownPlayError(StatementError):
    """A performance references a play id missing from the lookup"""

    def __init__(self, play_id: str):
        super().__init__(f"unknown play: {play_id}")
        self.play_id = play_id


class UnknownPlayTypeError(StatementError):
    """A play has a genre outside the priced set"""

    def __init__(self, play_type: str):
        super().__init__(f"unknown type: {play_type}")
        self.play_type = play_type


# ==================== Core Models ====================

class Play:
    """A play that can be performed"""

    def __init__(self, name: str, play_type: str):
        self._name = name
        self._type = play_type  # raw genre string as supplied

    def get_name(self) -> str:
        return self._name

    def get_type(self) -> str:
        return self._type

    def get_play_type(self) -> Optional[PlayType]:
        return PlayType.from_value(self._type)

    def __repr__(self) -> str:
        return f"Play({self._name!r}, {self._type!r})"


class Performance:
    """One performance of a play and how many people attended"""

    def __init__(self, play_id: str, audience: int):
        self._play_id = play_id
        self._audience = audience

    def get_play_id(self) -> str:
        return self._play_id

    def get_audience(self) -> int:
        return self._audience

    def __repr__(self) -> str:
        return f"Performance({self._play_id!r}, {self._audience})"


class Invoice:
    """Customer invoice listing performances in billing order"""

    def __init__(self, customer: str, performances: Sequence[Performance]):
        self._customer = customer
        self._performances: Tuple[Performance, ...] = tuple(performances)

    def get_customer(self) -> str:
        return self._customer

    def get_performances(self) -> Tuple[Performance, ...]:
        return self._performances


@dataclass(frozen=True)
class StatementLine:
    """Priced line of a statement"""
    play_name: str
    amount: int
    audience: int
    volume_credits: int


# ==================== Formatting ====================

def usd(amount: int) -> str:
    """Format an amount in cents as a US currency string"""
    dollars = (Decimal(amount) / Decimal(Constants.PERCENT_FACTOR)).quantize(
        Decimal('0.01'), rounding=ROUND_HALF_UP)
    sign = "-" if dollars < 0 else ""
    return f"{sign}${abs(dollars):,.2f}"


# ==================== Statement Engine ====================

class StatementEngine:
    """
    Prices an invoice of performances and renders the customer statement.

    The play lookup is kept as a read-only view; nothing here mutates the
    invoice or the plays, so one engine can render any number of times.
    """

    def __init__(self, invoice: Invoice, plays: Mapping[str, Play],
                 currency_formatter: Callable[[int], str] = usd):
        self._invoice = invoice
        self._plays: Mapping[str, Play] = MappingProxyType(dict(plays))
        self._format_currency = currency_formatter

    def get_invoice(self) -> Invoice:
        return self._invoice

    def get_plays(self) -> Mapping[str, Play]:
        return self._plays

    def resolve_play(self, performance: Performance) -> Play:
        """Return the play for a performance, raising if its id is unknown"""
        play = self._plays.get(performance.get_play_id())
        if play is None:
            logger.warning("No play found for id %s", performance.get_play_id())
            raise UnknownPlayError(performance.get_play_id())
        return play

    def amount_for(self, performance: Performance) -> int:
        """
        Calculate the charge in cents for a single performance.

        Raises:
            UnknownPlayError: the play id is not in the lookup
            UnknownPlayTypeError: the play's genre is not priced
        """
        play = self.resolve_play(performance)
        audience = performance.get_audience()
        play_type = play.get_play_type()

        if play_type == PlayType.TRAGEDY:
            result = Constants.TRAGEDY_BASE_AMOUNT
            if audience > Constants.TRAGEDY_AUDIENCE_THRESHOLD:
                result += (Constants.TRAGEDY_EXTRA_PER_AUDIENCE
                           * (audience - Constants.TRAGEDY_AUDIENCE_THRESHOLD))

        elif play_type == PlayType.COMEDY:
            result = Constants.COMEDY_BASE_AMOUNT
            if audience > Constants.COMEDY_AUDIENCE_THRESHOLD:
                result += (Constants.COMEDY_OVER_BASE_CAPACITY_AMOUNT
                           + Constants.COMEDY_OVER_BASE_CAPACITY_PER_PERSON
                           * (audience - Constants.COMEDY_AUDIENCE_THRESHOLD))
            result += Constants.COMEDY_AMOUNT_PER_AUDIENCE * audience

        else:
            logger.warning("Play %s has unknown type %s",
                           play.get_name(), play.get_type())
            raise UnknownPlayTypeError(play.get_type())

        logger.debug("Priced %s for %d seats at %d", play.get_name(), audience, result)
        return result

    def volume_credits_for(self, performance: Performance) -> int:
        """Calculate the volume credits earned for a single performance"""
        play = self.resolve_play(performance)
        audience = performance.get_audience()

        result = max(audience - Constants.BASE_VOLUME_CREDIT_THRESHOLD, 0)

        # Only comedies earn the extra credit; any other genre takes the base term
        if play.get_play_type() == PlayType.COMEDY:
            result += audience // Constants.COMEDY_EXTRA_VOLUME_FACTOR

        return result

    def get_total_amount(self) -> int:
        """Total amount owed in cents"""
        total_amount = 0
        for performance in self._invoice.get_performances():
            total_amount += self.amount_for(performance)
        return total_amount

    def get_total_volume_credits(self) -> int:
        """Total volume credits earned across the invoice"""
        volume_credits = 0
        for performance in self._invoice.get_performances():
            volume_credits += self.volume_credits_for(performance)
        return volume_credits

    def get_statement_lines(self) -> List[StatementLine]:
        """Priced lines in invoice order"""
        lines = []
        for performance in self._invoice.get_performances():
            lines.append(StatementLine(
                play_name=self.resolve_play(performance).get_name(),
                amount=self.amount_for(performance),
                audience=performance.get_audience(),
                volume_credits=self.volume_credits_for(performance),
            ))
        return lines

    def render_statement(self) -> str:
        """
        Render the formatted statement for the invoice.

        Everything is priced before any text is built, so a bad play id or
        genre raises without producing part of a statement.
        """
        lines = self.get_statement_lines()
        total_amount = sum(line.amount for line in lines)
        volume_credits = sum(line.volume_credits for line in lines)

        result = [f"Statement for {self._invoice.get_customer()}\n"]
        for line in lines:
            result.append(f"  {line.play_name}: "
                          f"{self._format_currency(line.amount)} "
                          f"({line.audience} seats)\n")
        result.append(f"Amount owed is {self._format_currency(total_amount)}\n")
        result.append(f"You earned {volume_credits} credits\n")

        logger.info("Rendered statement for %s: %d performance(s), total %d",
                    self._invoice.get_customer(), len(lines), total_amount)
        return "".join(result)

    def statement(self) -> str:
        return self.render_statement()


# ==================== Demo ====================

def print_section(title: str) -> None:
    """Print section header"""
    print(f"\n{'=' * 70}")
    print(f" {title}")
    print('=' * 70)


def sample_plays() -> Dict[str, Play]:
    return {
        "hamlet": Play("Hamlet", PlayType.TRAGEDY.value),
        "as-like": Play("As You Like It", PlayType.COMEDY.value),
        "othello": Play("Othello", PlayType.TRAGEDY.value),
    }


def sample_invoice() -> Invoice:
    return Invoice("BigCo", [
        Performance("hamlet", 55),
        Performance("as-like", 35),
        Performance("othello", 40),
    ])


def demo_statement() -> None:
    """Walk through pricing and statement rendering"""
    plays = sample_plays()
    invoice = sample_invoice()
    engine = StatementEngine(invoice, plays)

    # ==================== Statement ====================
    print_section("1. Customer Statement")
    print()
    print(engine.render_statement(), end="")

    # ==================== Line Breakdown ====================
    print_section("2. Line Breakdown")
    for line in engine.get_statement_lines():
        print(f"   {line.play_name:<16} {usd(line.amount):>10}  "
              f"{line.audience:>3} seats  {line.volume_credits:>3} credits")
    print(f"\n   Total: {usd(engine.get_total_amount())}, "
          f"Credits: {engine.get_total_volume_credits()}")

    # ==================== Error Handling ====================
    print_section("3. Unknown Play")
    missing = Invoice("SmallCo", [Performance("hamlet", 10), Performance("macbeth", 20)])
    try:
        StatementEngine(missing, plays).render_statement()
    except UnknownPlayError as e:
        print(f"\n   Rejected: {e}")

    print_section("4. Unknown Play Type")
    pastoral = dict(plays)
    pastoral["tempest"] = Play("The Tempest", "pastoral")
    try:
        StatementEngine(Invoice("SmallCo", [Performance("tempest", 12)]),
                        pastoral).render_statement()
    except UnknownPlayTypeError as e:
        print(f"\n   Rejected: {e} (type={e.play_type})")

    print_section("Demo Complete")


# ==================== Main Entry Point ====================

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        demo_statement()
    except KeyboardInterrupt:
        print("\n\nDemo interrupted by user")
    except StatementError as e:
        logger.error("Statement generation failed: %s", e)
        sys.exit(1)


# Theater Statement Engine - Low Level Design

# Key Design Decisions:
# 1. Core Components:
# Play: name and raw genre string of a play
# Performance: play id plus audience size
# Invoice: customer and performances in billing order
# StatementEngine: prices performances, sums totals, renders the statement
# StatementLine: one priced line, used by the text statement and by callers
# 2. Pricing:
# All arithmetic is integer cents; only formatting converts to dollars
# Tragedy: flat base, per-seat extra above 30 seats
# Comedy: flat base, surcharge plus per-seat extra above 20 seats, per-seat charge always
# Genres are a closed PlayType enum; anything else raises UnknownPlayTypeError
# 3. Volume Credits:
# One credit per seat above 30, plus a seat/5 bonus for comedies
# Unknown genres still earn the base credits
# 4. Errors:
# UnknownPlayError and UnknownPlayTypeError share the StatementError base
# Nothing is caught inside the engine; a statement is rendered whole or not at all
# 5. Formatting:
# usd() converts cents with Decimal and ROUND_HALF_UP, never float
# The formatter is injectable so other locales can be plugged in by the caller
