"""
Central Configuration File (SSOT).
"""

# --- Business Rules ---
CURRENCY = "USD"
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "USD": "$",
    "EUR": "€",
    "PHP": "₱",
}
MINIMUM_BALANCE = "1000.00"        # savings floor
DEFAULT_CURRENT_BALANCE = "0.00"   # seed for the current account at startup
MIN_TRANSACTION = "0.01"
MAX_TRANSACTION = "1000000.00"

# --- Console Layout ---
HEADER_WIDTH: int = 40
SEPARATOR_WIDTH: int = 40

# --- Logging ---
LOG_LEVEL: str = "WARNING"  # keeps menu output clean; DEBUG shows every outcome
LOG_FORMAT: str = "standard"  # "standard" or "json"
