"""Mapping from numeric ratings to the star-row display convention."""

MAX_RATING = 5
STAR_ROW = "★" * MAX_RATING


def star_fill_percent(rating: float) -> float:
    """Percentage of the five-star row to fill for a rating."""
    return rating / MAX_RATING * 100


def format_rating(rating: float) -> str:
    """
    Format a rating for display.

    Whole ratings drop the decimal part ("3"), half ratings keep it ("2.5").
    """
    if float(rating).is_integer():
        return str(int(rating))
    return str(rating)


def rating_label(rating: float) -> str:
    """Accessible text equivalent of the star row."""
    return f"Rating: {format_rating(rating)} out of {MAX_RATING} stars"
