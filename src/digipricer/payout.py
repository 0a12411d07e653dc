"""Stake / payout / premium conversions for digital positions."""

ODDS_PRICE_FLOOR = 1e-12


def payout_cash_or_nothing(stake: float, won: bool) -> float:
    """Winner receives the stake, loser receives 0."""
    return stake if won else 0.0


def payout_odds_based(stake: float, digital_price: float, won: bool) -> float:
    """Winner receives ``stake / digital_price``; a cheaper digital pays more.

    The price is floored at ``1e-12`` so a numerically-zero price cannot
    blow up the division.
    """
    if not won:
        return 0.0
    return stake / max(digital_price, ODDS_PRICE_FLOOR)


def calculate_premium(stake: float, digital_price: float) -> float:
    """Cost to enter a position of ``stake`` at ``digital_price``."""
    return stake * digital_price
