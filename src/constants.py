"""Shared constants for the rozmarra calculators."""

# Connector words kept lowercase in titles unless they start the title
MINOR_WORDS = frozenset(
    ["ka", "ki", "ke", "se", "aur", "ya", "the", "of", "in", "a", "an"]
)

# Report card grading, checked top-down against the rounded percentage
GRADE_BANDS = [
    (90, "A+"),
    (80, "A"),
    (70, "B"),
    (60, "C"),
    (40, "D"),
]
FAIL_GRADE = "F"
MAX_MARK = 100
PASS_MARK = 40

# Auction player roles that get counted in the role breakdown
PLAYER_ROLES = ["bat", "bowl", "ar", "wk"]

# Order billing
GST_RATE = 0.05
# (minimum subtotal, fee), checked top-down
DELIVERY_FEE_TIERS = [
    (1000, 0),
    (500, 15),
    (0, 30),
]
ADDON_SEPARATOR = ":"

COUPON_FIRST50 = "FIRST50"
COUPON_FLAT100 = "FLAT100"
COUPON_FREESHIP = "FREESHIP"
FIRST50_RATE = 0.5
FIRST50_CAP = 150
FLAT100_AMOUNT = 100

# Transaction log
TRANSACTION_TYPES = ["credit", "debit"]
SMALL_TRANSACTION_LIMIT = 100
LARGE_TRANSACTION_THRESHOLD = 5000

# Form validation
NAME_LENGTH = (2, 50)
AGE_RANGE = (16, 100)
PHONE_LENGTH = 10
PHONE_FIRST_DIGITS = "6789"
PINCODE_LENGTH = 6
ASCII_DIGITS = frozenset("0123456789")

FORM_ERRORS = {
    "name": "Name must be 2-50 characters",
    "email": "Invalid email format",
    "phone": "Invalid Indian phone number",
    "age": "Age must be an integer between 16 and 100",
    "pincode": "Invalid Indian pincode",
    "state": "State is required",
    "agreeTerms": "Must agree to terms",
}
