"""Book club anniversary awards: tenure, attendance and award tiers."""

__version__ = "0.1.0"
