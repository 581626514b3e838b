import re
import unicodedata

# Letters NFKD cannot decompose into an ASCII base
TRANSLITERATIONS = str.maketrans({
    "đ": "d",
    "Đ": "D",
    "ø": "o",
    "Ø": "O",
    "ł": "l",
    "Ł": "L",
    "ß": "ss",
})


def slugify(text: str) -> str:
    """
    Build a URL-safe slug from a human-readable name.

    "Café Central!" -> "cafe-central". Applying it twice gives the same
    result as applying it once.
    """
    # Transliterate unicode to ASCII (e.g., "Café" -> "Cafe")
    normalized = unicodedata.normalize("NFKD", str(text).translate(TRANSLITERATIONS))
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii")

    slug = ascii_text.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")
