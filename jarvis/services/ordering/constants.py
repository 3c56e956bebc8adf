"""Word lists and limits for Jarvis quick-order parsing."""

MIN_QUANTITY = 1
MAX_QUANTITY = 50

# Minimum token-overlap score for the last matching tier
MIN_OVERLAP_SCORE = 0.4

HINDI_NUMBERS = {
    "ek": 1,
    "do": 2,
    "teen": 3,
    "char": 4,
    "panch": 5,
    "che": 6,
    "saat": 7,
    "aath": 8,
    "nau": 9,
    "das": 10,
}

# Words that never identify a menu item
FILLER_WORDS = frozenset([
    # ordering verbs
    "kar", "karo", "kardo", "kro", "de", "do", "dedo", "dena",
    "add", "order", "laga", "lagao", "lagado", "bhej", "bhejo",
    "chahiye", "chaiye", "manga", "mangao", "mangwa", "rakh",
    "la", "lao", "lana", "hai", "hain",
    # possessives
    "mere", "mera", "meri", "mujhe", "ko", "liye", "ke", "ka",
    # units
    "packet", "packets", "plate", "plates", "piece", "pieces",
    "glass", "glasses", "cup", "cups", "bowl", "bowls", "set", "sets",
    # politeness and conjunctions
    "please", "plz", "pls", "bhi", "aur", "or", "and",
    "ek",
])
